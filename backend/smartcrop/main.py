"""Gradio web interface for trying smartcrop on an image."""

from __future__ import annotations

import logging
import os
import sys
import time
import traceback

from PIL import Image

from .backends import apply_crop
from .config import Config
from .debug import render_debug_overlay
from .engine import ImageCrop
from .exceptions import SmartcropError
from .logging_config import setup_logging
from .options import Options

logger = logging.getLogger("smartcrop.main")

# Optional Gradio import
try:
    import gradio as gr

    HAS_GRADIO = True
except ImportError:
    HAS_GRADIO = False


def run_crop(
    image: Image.Image | None,
    width: float,
    height: float,
    debug: bool,
) -> tuple:
    """Crop ``image`` to the best ``width`` x ``height`` region.

    Returns:
        (cropped image, debug overlay, result dict, status text).
    """
    if image is None:
        return None, None, None, "Please upload an image"

    try:
        options = Options.for_size(int(width or 0), int(height or 0), debug=bool(debug))
        started = time.perf_counter()
        result = ImageCrop(options).crop(image)
        elapsed = time.perf_counter() - started

        cropped = apply_crop(image, result)
        overlay = None
        best_score = None
        if result.debug_info is not None:
            overlay = render_debug_overlay(result.debug_info, result.area)
            best = result.debug_info.top_crops(1)
            best_score = best[0].score.total if best else None

        area = result.area
        summary = {
            "x": area.x,
            "y": area.y,
            "width": area.width,
            "height": area.height,
            "score": best_score,
        }
        logger.info("Cropped %dx%d -> %s in %.3fs", image.width, image.height, area, elapsed)
        return cropped, overlay, summary, f"Found crop in {elapsed * 1000:.0f} ms"
    except SmartcropError as e:
        return None, None, None, f"Error: {str(e)}"
    except Exception as e:
        traceback.print_exc()
        return None, None, None, f"Unexpected error: {str(e)}"


def create_interface() -> object:
    """Create Gradio interface for the crop sample."""
    default_w, default_h = Config.DEFAULT_CROP_SIZE

    with gr.Blocks(title="Smartcrop - Content-Aware Cropping") as interface:
        gr.Markdown(
            """
        # Smartcrop - Content-Aware Cropping

        Upload an image and choose the crop size; the most interesting
        region is selected from edges, skin tones and saturated colour.
        """
        )

        with gr.Row():
            with gr.Column(scale=1):
                source_image = gr.Image(label="Source Image", type="pil")

                with gr.Row():
                    crop_width = gr.Number(value=default_w, label="Crop Width")
                    crop_height = gr.Number(value=default_h, label="Crop Height")

                debug_toggle = gr.Checkbox(value=True, label="Show debug image")
                crop_btn = gr.Button("Crop", variant="primary")

            with gr.Column(scale=1):
                cropped_image = gr.Image(label="Cropped", type="pil")
                debug_image = gr.Image(label="Debug (skin=red, detail=green, saturation=blue)", type="pil")
                result_json = gr.JSON(label="Result")
                status = gr.Markdown("**Status:** Ready")

        inputs = [source_image, crop_width, crop_height, debug_toggle]
        outputs = [cropped_image, debug_image, result_json, status]

        crop_btn.click(run_crop, inputs=inputs, outputs=outputs)
        # Re-crop whenever the image or target size changes
        for component in (source_image, crop_width, crop_height):
            component.change(run_crop, inputs=inputs, outputs=outputs)

    return interface


def main() -> None:
    """Main entry point."""
    setup_logging(os.environ.get("SMARTCROP_LOG_LEVEL", "INFO"))

    if not HAS_GRADIO:
        logger.error("Gradio is required. Run: pip install gradio")
        sys.exit(1)

    logger.info("Starting web interface...")

    try:
        interface = create_interface()
        interface.launch(
            server_name="0.0.0.0",
            server_port=7860,
            share=False,
            show_error=True,
        )
    except Exception as e:
        logger.error("Failed to start: %s", e)
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
