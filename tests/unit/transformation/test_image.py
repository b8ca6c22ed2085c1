"""Tests for Image and delivery URL building."""

import pytest
from pydantic import ValidationError

from cloudinary_kit.transformation import (
    AspectRatioSides,
    Fill,
    Gravity,
    Image,
    ScaleByWidth,
    build_url,
)

BASE = "https://res.cloudinary.com"


class TestImage:
    """Tests for the Image model."""

    def test_defaults(self) -> None:
        """Test a new image has no format and no transformations."""
        image = Image(cloud_name="demo", public_id="sample")

        assert image.format is None
        assert image.transformations == []

    def test_empty_public_id_rejected(self) -> None:
        """Test the public ID cannot be empty."""
        with pytest.raises(ValidationError):
            Image(cloud_name="demo", public_id="")

    def test_empty_cloud_name_rejected(self) -> None:
        """Test the cloud name cannot be empty."""
        with pytest.raises(ValidationError):
            Image(cloud_name="", public_id="sample")

    def test_cloud_name_immutable(self) -> None:
        """Test the cloud name cannot be reassigned after construction."""
        image = Image(cloud_name="demo", public_id="sample")

        with pytest.raises(ValidationError):
            image.cloud_name = "other"

        assert image.build() == f"{BASE}/demo/image/upload/sample"

    @pytest.mark.parametrize("public_id", ["/sample", "folder/", "/"])
    def test_public_id_slash_edges_rejected(self, public_id: str) -> None:
        """Test public IDs cannot start or end with a slash."""
        with pytest.raises(ValidationError):
            Image(cloud_name="demo", public_id=public_id)

    def test_add_transformation_chains(self) -> None:
        """Test add_transformation appends and returns the image."""
        image = Image(cloud_name="demo", public_id="sample")
        first = ScaleByWidth(width=100)
        second = Fill(width=50, height=50)

        result = image.add_transformation(first).add_transformation(second)

        assert result is image
        assert image.transformations == [first, second]

    def test_set_format_validates(self) -> None:
        """Test an empty format is rejected on assignment."""
        image = Image(cloud_name="demo", public_id="sample")
        with pytest.raises(ValidationError):
            image.set_format("")


class TestBuildUrl:
    """Tests for delivery URL rendering."""

    def test_seed_scenario(self) -> None:
        """Test a liquid scale with aspect ratio."""
        image = Image(cloud_name="test", public_id="path/name").add_transformation(
            ScaleByWidth(width=100, ar=AspectRatioSides(width=16, height=9), liquid=True)
        )

        assert (
            image.build()
            == f"{BASE}/test/image/upload/ar_16:9,c_scale,w_100,g_liquid/path/name"
        )

    def test_without_transformations(self) -> None:
        """Test no transformation segment is emitted for an empty sequence."""
        image = Image(cloud_name="demo", public_id="folder/sample")
        assert build_url(image) == f"{BASE}/demo/image/upload/folder/sample"

    def test_str_matches_build(self) -> None:
        """Test str() renders the URL."""
        image = Image(cloud_name="demo", public_id="sample", format="png")
        assert str(image) == image.build() == f"{BASE}/demo/image/upload/sample.png"

    def test_multiple_segments(self) -> None:
        """Test every transformation becomes its own path segment."""
        image = (
            Image(cloud_name="demo", public_id="sample")
            .add_transformation(Fill(width=100, height=100, gravity=Gravity.FACES))
            .add_transformation(ScaleByWidth(width=50))
        )

        assert (
            image.build()
            == f"{BASE}/demo/image/upload/c_fill,g_faces,w_100,h_100/c_scale,w_50/sample"
        )

    def test_format_replaced_once(self) -> None:
        """Test overwriting the format never duplicates extensions."""
        image = Image(cloud_name="demo", public_id="path/name", format="jpg")
        image.set_format("png")

        url = image.build()

        assert url.endswith("path/name.png")
        assert url.count(".png") == 1
        assert ".jpg" not in url

    def test_format_replaces_existing_extension(self) -> None:
        """Test an extension in the public ID is swapped for the format."""
        image = Image(cloud_name="demo", public_id="path/name.jpg", format="webp")
        assert image.build() == f"{BASE}/demo/image/upload/path/name.webp"

    def test_format_only_touches_last_segment(self) -> None:
        """Test dots in folder names are left alone."""
        image = Image(cloud_name="demo", public_id="v1.0/name", format="png")
        assert image.build() == f"{BASE}/demo/image/upload/v1.0/name.png"

    def test_no_format_keeps_public_id(self) -> None:
        """Test the public ID is used verbatim without a format."""
        image = Image(cloud_name="demo", public_id="name.jpg")
        assert image.build() == f"{BASE}/demo/image/upload/name.jpg"

    def test_percent_encoding(self) -> None:
        """Test reserved characters are escaped in the path."""
        image = Image(cloud_name="demo", public_id="my folder/näme")
        assert image.build() == f"{BASE}/demo/image/upload/my%20folder/n%C3%A4me"

    def test_existing_escapes_preserved(self) -> None:
        """Test existing percent escapes are not double-encoded."""
        image = Image(cloud_name="demo", public_id="with%20space")
        assert image.build() == f"{BASE}/demo/image/upload/with%20space"

    def test_rendering_is_pure(self) -> None:
        """Test building twice yields the same URL and leaves the image intact."""
        image = Image(cloud_name="demo", public_id="sample", format="png").add_transformation(
            ScaleByWidth(width=100)
        )

        assert image.build() == image.build()
        assert image.public_id == "sample"
        assert len(image.transformations) == 1
