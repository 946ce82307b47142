"""Tests for the detail, skin, saturation and boost passes."""

import numpy as np
import pytest

from backend.smartcrop.analysis.salience import (
    apply_boosts,
    build_analysis_buffer,
    edge_detect,
    saturation,
    saturation_detect,
    skin_color_similarity,
    skin_detect,
)
from backend.smartcrop.enums import AnalysisChannel, ChannelOrder
from backend.smartcrop.imaging.pixel_buffer import PixelBuffer
from backend.smartcrop.models import BoostArea, Rectangle
from backend.smartcrop.options import Options


class TestEdgeDetect:
    def test_uniform_image_has_detail_only_on_border(self, make_buffer):
        detail = edge_detect(make_buffer(5, 5, (100, 100, 100)))
        # luma of gray 100 is 1.3 * 100
        assert detail[0, 0] == 130
        assert detail[4, 2] == 130
        assert (detail[1:-1, 1:-1] == 0).all()

    def test_bright_center_saturates(self, make_buffer):
        buffer = make_buffer(5, 5, (0, 0, 0))
        buffer.data[2, 2, :3] = 255
        detail = edge_detect(buffer)
        assert detail[2, 2] == 255
        # Neighbours see a negative Laplacian and clamp to zero
        assert detail[1, 2] == 0
        assert detail[2, 1] == 0

    def test_luma_weights_follow_channel_order(self, make_buffer):
        red = edge_detect(make_buffer(1, 1, (255, 0, 0)))
        blue = edge_detect(make_buffer(1, 1, (0, 0, 255)))
        assert red[0, 0] == round(0.0722 * 255)
        assert blue[0, 0] == round(0.5126 * 255)

    def test_same_bytes_differ_between_orders(self):
        data = np.zeros((1, 1, 4), dtype=np.uint8)
        data[0, 0] = (255, 0, 0, 255)
        rgba = edge_detect(PixelBuffer(data=data, order=ChannelOrder.RGBA))
        bgra = edge_detect(PixelBuffer(data=data, order=ChannelOrder.BGRA))
        assert rgba[0, 0] != bgra[0, 0]

    def test_single_row_image(self, make_buffer):
        detail = edge_detect(make_buffer(6, 1, (10, 10, 10)))
        assert detail.shape == (1, 6)
        assert (detail == 13).all()


class TestSkinDetect:
    def test_skin_tone_detected(self, skin_buffer):
        skin = skin_detect(skin_buffer, Options())
        assert (skin > 0).all()

    def test_value_rescales_excess_similarity(self, skin_buffer):
        similarity = skin_color_similarity(skin_buffer, Options().skin_color)[0, 0]
        expected = int(min(255.0, (similarity - 0.8) * (255.0 / (1.0 - 0.8))))
        assert skin_detect(skin_buffer, Options())[0, 0] == expected

    def test_blue_is_not_skin(self, make_buffer):
        assert (skin_detect(make_buffer(3, 3, (0, 0, 255)), Options()) == 0).all()

    def test_dark_skin_tone_below_brightness_window(self, make_buffer):
        dark = make_buffer(3, 3, (20, 15, 11))
        assert (skin_detect(dark, Options()) == 0).all()

    def test_black_pixels_do_not_divide_by_zero(self, make_buffer):
        with np.errstate(all="raise"):
            skin = skin_detect(make_buffer(2, 2, (0, 0, 0)), Options())
        assert (skin == 0).all()

    def test_skin_depends_on_channel_order(self, skin_rgb):
        data = np.zeros((2, 2, 4), dtype=np.uint8)
        data[:, :] = skin_rgb + (255,)
        as_rgba = skin_detect(PixelBuffer(data=data, order=ChannelOrder.RGBA), Options())
        as_bgra = skin_detect(PixelBuffer(data=data, order=ChannelOrder.BGRA), Options())
        assert (as_rgba > 0).all()
        assert (as_bgra == 0).all()


class TestSaturation:
    @pytest.mark.parametrize(
        "color, expected",
        [
            ((255, 0, 0), 1.0),
            ((128, 128, 128), 0.0),
            ((255, 128, 128), 1.0),
            ((100, 50, 50), 1.0 / 3.0),
            ((0, 0, 0), 0.0),
            ((255, 255, 255), 0.0),
        ],
    )
    def test_hsl_saturation(self, make_buffer, color, expected):
        assert saturation(make_buffer(1, 1, color))[0, 0] == pytest.approx(expected)

    def test_saturated_red_detected(self, make_buffer):
        sat = saturation_detect(make_buffer(2, 2, (255, 0, 0)), Options())
        assert (sat >= 254).all()

    def test_gray_not_saturated(self, make_buffer):
        assert (saturation_detect(make_buffer(2, 2, (128, 128, 128)), Options()) == 0).all()

    def test_below_threshold_is_zero(self, make_buffer):
        assert (saturation_detect(make_buffer(2, 2, (100, 50, 50)), Options()) == 0).all()

    def test_too_bright_is_zero(self, make_buffer):
        # Saturated but luma above saturation_brightness_max
        assert (saturation_detect(make_buffer(2, 2, (255, 255, 200)), Options()) == 0).all()


class TestApplyBoosts:
    def _analysis(self) -> np.ndarray:
        return np.zeros((10, 10, 4), dtype=np.uint8)

    def test_single_boost(self):
        analysis = self._analysis()
        apply_boosts(analysis, [BoostArea(Rectangle(2, 2, 3, 3), 0.5)])
        boost = analysis[:, :, AnalysisChannel.BOOST]
        assert (boost[2:5, 2:5] == 127).all()
        assert boost.sum() == 127 * 9

    def test_overlapping_boosts_accumulate(self):
        analysis = self._analysis()
        apply_boosts(analysis, [
            BoostArea(Rectangle(0, 0, 4, 4), 0.5),
            BoostArea(Rectangle(2, 2, 4, 4), 0.5),
        ])
        boost = analysis[:, :, AnalysisChannel.BOOST]
        assert boost[0, 0] == 127
        assert boost[3, 3] == 254
        assert boost[5, 5] == 127

    def test_boost_clamped_to_255(self):
        analysis = self._analysis()
        apply_boosts(analysis, [BoostArea(Rectangle(0, 0, 2, 2), 1.0)] * 3)
        assert analysis[0, 0, AnalysisChannel.BOOST] == 255

    def test_negative_weight_clamped_to_zero(self):
        analysis = self._analysis()
        apply_boosts(analysis, [BoostArea(Rectangle(0, 0, 2, 2), -1.0)])
        assert analysis[0, 0, AnalysisChannel.BOOST] == 0

    def test_area_outside_buffer_is_clipped(self):
        analysis = self._analysis()
        apply_boosts(analysis, [BoostArea(Rectangle(8, 8, 5, 5), 1.0)])
        boost = analysis[:, :, AnalysisChannel.BOOST]
        assert (boost[8:, 8:] == 255).all()
        assert boost.sum() == 255 * 4

    def test_channel_reset_before_compositing(self):
        analysis = self._analysis()
        analysis[:, :, AnalysisChannel.BOOST] = 99
        analysis[:, :, AnalysisChannel.DETAIL] = 7
        apply_boosts(analysis, [])
        assert (analysis[:, :, AnalysisChannel.BOOST] == 0).all()
        assert (analysis[:, :, AnalysisChannel.DETAIL] == 7).all()


class TestBuildAnalysisBuffer:
    def test_channels_populated(self, make_buffer):
        buffer = make_buffer(16, 16, (255, 0, 0))
        analysis = build_analysis_buffer(
            buffer, Options(), [BoostArea(Rectangle(0, 0, 8, 8), 1.0)]
        )
        assert analysis.shape == (16, 16, 4)
        assert analysis.dtype == np.uint8
        assert analysis[0, 0, AnalysisChannel.DETAIL] > 0
        assert (analysis[:, :, AnalysisChannel.SKIN] == 0).all()
        assert (analysis[:, :, AnalysisChannel.SATURATION] >= 254).all()
        assert analysis[0, 0, AnalysisChannel.BOOST] == 255
        assert analysis[15, 15, AnalysisChannel.BOOST] == 0
