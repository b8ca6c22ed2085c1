"""Tests for resize, crop and pad transformation rendering."""

import pytest
from pydantic import ValidationError

from cloudinary_kit.transformation import (
    AspectRatioResult,
    AspectRatioSides,
    Auto,
    AutoMode,
    Fill,
    FillByHeight,
    FillByWidth,
    GradientColors,
    GradientDirection,
    Gravity,
    IgnoreAspectRatio,
    NamedColor,
    Pad,
    PadByHeight,
    PadByWidth,
    Rgb,
    Scale,
    ScaleByHeight,
    ScaleByWidth,
    render_transformations,
)


class TestResizeModes:
    """Tests for scale transformations."""

    def test_scale_by_width(self) -> None:
        """Test scaling by width only."""
        assert str(ScaleByWidth(width=100)) == "c_scale,w_100"

    def test_scale_by_width_with_ignore_flag(self) -> None:
        """Test the ignore-aspect-ratio flag renders first."""
        transformation = ScaleByWidth(width=100, ar=IgnoreAspectRatio())
        assert str(transformation) == "fl_ignore_aspect_ratio,c_scale,w_100"

    def test_scale_by_height_with_ratio(self) -> None:
        """Test scaling by height with a decimal ratio."""
        transformation = ScaleByHeight(height=100, ar=AspectRatioResult(value=0.5))
        assert str(transformation) == "ar_0.5,c_scale,h_100"

    def test_liquid_goes_after_dimensions(self) -> None:
        """Test liquid rescaling trails the dimensions."""
        transformation = ScaleByWidth(
            width=100, ar=AspectRatioSides(width=16, height=9), liquid=True
        )
        assert str(transformation) == "ar_16:9,c_scale,w_100,g_liquid"

    def test_scale_exact(self) -> None:
        """Test scaling to exact dimensions."""
        assert str(Scale(width=100, height=50)) == "c_scale,w_100,h_50"
        assert str(Scale(width=100, height=50, liquid=True)) == "c_scale,w_100,h_50,g_liquid"

    def test_negative_width_rejected(self) -> None:
        """Test dimensions cannot be negative."""
        with pytest.raises(ValidationError):
            ScaleByWidth(width=-1)

    def test_values_are_immutable(self) -> None:
        """Test transformations are frozen values."""
        transformation = ScaleByWidth(width=100)
        with pytest.raises(ValidationError):
            transformation.width = 200


class TestCropModes:
    """Tests for fill transformations."""

    def test_fill_by_width(self) -> None:
        """Test fill with ratio and gravity."""
        transformation = FillByWidth(
            width=100, ar=AspectRatioSides(width=16, height=9), gravity=Gravity.NORTH
        )
        assert str(transformation) == "ar_16:9,c_fill,g_north,w_100"

    def test_fill_by_height(self) -> None:
        """Test fill by height without qualifiers."""
        assert str(FillByHeight(height=80)) == "c_fill,h_80"

    def test_fill_exact_with_gravity(self) -> None:
        """Test fill with compound gravity."""
        transformation = Fill(width=100, height=100, gravity=Gravity.AUTO_CLASSIC)
        assert str(transformation) == "c_fill,g_auto:classic,w_100,h_100"


class TestPadModes:
    """Tests for pad transformations."""

    def test_pad_with_all_qualifiers(self) -> None:
        """Test the qualifier order background, ratio, mode, gravity, width."""
        transformation = PadByWidth(
            width=100,
            ar=AspectRatioSides(width=16, height=9),
            background=Auto(
                mode=AutoMode.BORDER_GRADIENT,
                number=GradientColors.FOUR,
                direction=GradientDirection.VERTICAL,
                palette=(NamedColor.BLACK, NamedColor.WHITE),
            ),
            gravity=Gravity.NORTH,
        )
        assert (
            str(transformation)
            == "b_auto:border_gradient:4:vertical:palette_black_white,ar_16:9,c_pad,g_north,w_100"
        )

    def test_pad_by_width_minimal(self) -> None:
        """Test pad with width only."""
        assert str(PadByWidth(width=100)) == "c_pad,w_100"

    def test_pad_by_height_with_color(self) -> None:
        """Test pad with an explicit color."""
        transformation = PadByHeight(height=300, background=Rgb(r=2, g=10, b=255))
        assert str(transformation) == "b_rgb:020aff,c_pad,h_300"

    def test_pad_exact(self) -> None:
        """Test pad to exact dimensions."""
        transformation = Pad(
            width=200, height=100, background=NamedColor.BLACK, gravity=Gravity.SOUTH
        )
        assert str(transformation) == "b_black,c_pad,g_south,w_200,h_100"


class TestSequence:
    """Tests for sequence rendering."""

    def test_empty(self) -> None:
        """Test an empty sequence renders nothing."""
        assert render_transformations([]) == ""

    def test_slash_separated_in_order(self) -> None:
        """Test segments keep insertion order, duplicates included."""
        sequence = [
            ScaleByWidth(width=100),
            Fill(width=50, height=50),
            ScaleByWidth(width=100),
        ]
        assert render_transformations(sequence) == "c_scale,w_100/c_fill,w_50,h_50/c_scale,w_100"

    def test_custom_separator(self) -> None:
        """Test the pipe separator used for eager transformations."""
        sequence = [Fill(width=1, height=2), Pad(width=3, height=4)]
        assert render_transformations(sequence, separator="|") == "c_fill,w_1,h_2|c_pad,w_3,h_4"
