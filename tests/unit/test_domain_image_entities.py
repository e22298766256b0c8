"""Unit tests for the Image and Rating entities."""

import pytest

from clientgallery.domain.entities.image import Image, Rating
from clientgallery.domain.enums import ImageStatus, RatingValue
from clientgallery.domain.errors import ImageError, RatingError


def create_image(**overrides) -> Image:
    fields = {
        "gallery_id": 1,
        "filename": "img_0001.jpg",
        "original_filename": "DSC_0001.JPG",
        "file_size": 2_048_000,
        "mime_type": "image/jpeg",
        "width": 6000,
        "height": 4000,
    }
    fields.update(overrides)
    return Image(**fields)


@pytest.mark.unit
class TestImage:
    def test_defaults(self):
        image = create_image()

        assert image.status is ImageStatus.UPLOADED
        assert not image.is_featured
        assert not image.is_ready()
        assert image.aspect_ratio == 1.5

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"gallery_id": 0}, ImageError.GALLERY_REQUIRED),
            ({"filename": " "}, ImageError.FILENAME_REQUIRED),
            ({"file_size": 0}, ImageError.INVALID_FILE_SIZE),
            ({"mime_type": "application/pdf"}, ImageError.INVALID_MIME_TYPE),
            ({"height": 0}, ImageError.INVALID_DIMENSIONS),
        ],
    )
    def test_invalid_fields(self, overrides, message):
        with pytest.raises(ValueError) as exc_info:
            create_image(**overrides)
        assert str(exc_info.value) == message

    def test_set_featured_and_move(self):
        image = create_image()

        image.set_featured()
        image.move_to(4)

        assert image.is_featured
        assert image.sort_order == 4


@pytest.mark.unit
class TestRating:
    def test_score_bounds(self):
        assert Rating(image_id=1, client_id=1, rating=RatingValue.MAYBE, score=1).score == 1
        assert Rating(image_id=1, client_id=1, rating=RatingValue.MAYBE, score=10).score == 10

        with pytest.raises(ValueError, match=RatingError.INVALID_SCORE):
            Rating(image_id=1, client_id=1, rating=RatingValue.MAYBE, score=11)

    def test_references_required(self):
        with pytest.raises(ValueError, match=RatingError.IMAGE_REQUIRED):
            Rating(image_id=0, client_id=1, rating=RatingValue.SELECTED)
        with pytest.raises(ValueError, match=RatingError.CLIENT_REQUIRED):
            Rating(image_id=1, client_id=0, rating=RatingValue.SELECTED)

    def test_revise_replaces_verdict(self):
        rating = Rating(image_id=1, client_id=2, rating=RatingValue.MAYBE, comment="hmm")

        rating.revise(RatingValue.FAVORITE, 9, None)

        assert rating.rating is RatingValue.FAVORITE
        assert rating.score == 9
        assert rating.comment is None

    def test_revise_rejects_bad_score(self):
        rating = Rating(image_id=1, client_id=2, rating=RatingValue.MAYBE)

        with pytest.raises(ValueError):
            rating.revise(RatingValue.SELECTED, 0, None)

        assert rating.rating is RatingValue.MAYBE

    def test_positive_values(self):
        assert RatingValue.positive_values() == [RatingValue.SELECTED, RatingValue.FAVORITE]
