"""Tests for debug visualization and the sample app handler."""

import logging

import numpy as np
from PIL import Image

from backend.smartcrop.config import Config
from backend.smartcrop.debug import analysis_to_pixels, render_debug_overlay
from backend.smartcrop.enums import AnalysisChannel, ChannelOrder
from backend.smartcrop.engine import ImageCrop
from backend.smartcrop.logging_config import setup_logging
from backend.smartcrop.main import run_crop
from backend.smartcrop.models import Rectangle
from backend.smartcrop.options import Options


class TestAnalysisToPixels:
    def test_channel_mapping(self):
        analysis = np.zeros((1, 1, 4), dtype=np.uint8)
        analysis[0, 0, AnalysisChannel.DETAIL] = 1
        analysis[0, 0, AnalysisChannel.SKIN] = 2
        analysis[0, 0, AnalysisChannel.SATURATION] = 3
        analysis[0, 0, AnalysisChannel.BOOST] = 4

        pixels = analysis_to_pixels(analysis)

        assert pixels.order is ChannelOrder.RGBA
        # skin -> red, detail -> green, saturation -> blue, boost -> alpha
        assert tuple(pixels.data[0, 0]) == (2, 1, 3, 4)


class TestRenderDebugOverlay:
    def test_overlay_marks_crop(self, red_patch_image):
        result = ImageCrop(Options.for_size(100, 100, debug=True)).crop(red_patch_image)
        overlay = render_debug_overlay(result.debug_info, result.area)

        assert overlay.mode == "RGB"
        assert overlay.size == red_patch_image.size
        assert overlay.getpixel((result.area.x, result.area.y)) == Config.DEBUG_CROP_OUTLINE

    def test_overlay_scaled_for_prescaled_input(self):
        img = Image.new("RGB", (1024, 512), (128, 128, 128))
        result = ImageCrop(Options.for_size(256, 256, debug=True)).crop(img)
        overlay = render_debug_overlay(result.debug_info, Rectangle(0, 0, 512, 512), top=0)

        assert overlay.size == (512, 256)
        assert overlay.getpixel((0, 0)) == Config.DEBUG_CROP_OUTLINE
        assert overlay.getpixel((255, 255)) == Config.DEBUG_CROP_OUTLINE


class TestRunCrop:
    def test_no_image(self):
        assert run_crop(None, 100, 100, False)[3] == "Please upload an image"

    def test_crop_with_debug(self, red_patch_image):
        cropped, overlay, summary, status = run_crop(red_patch_image, 100, 100, True)
        assert cropped.size == (100, 100)
        assert overlay is not None
        assert summary["width"] == 100
        assert summary["score"] is not None
        assert status.startswith("Found crop")

    def test_crop_without_debug(self, gray_image):
        cropped, overlay, summary, _ = run_crop(gray_image, 50, 50, False)
        assert cropped.size == (100, 100)
        assert overlay is None
        assert summary["score"] is None

    def test_error_reported(self, gray_image):
        _, _, summary, status = run_crop(gray_image, -10, 10, False)
        assert summary is None
        assert status.startswith("Error:")


class TestSetupLogging:
    def test_single_handler(self):
        logger = setup_logging("DEBUG")
        setup_logging("INFO")
        assert logger.name == "smartcrop"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
