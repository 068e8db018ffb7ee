import logging

from pixoo import PixooClient, load_config


logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

config = load_config()

with PixooClient.from_config(config) as pixoo:
    pixoo.set_brightness(60)

    # Dark blue background
    pixoo.fill(0, 0, 64)

    # Yellow heading, white counter underneath; both fit a 16x16 display
    pixoo.draw_text("HI", 2, 2, 255, 255, 0)
    pixoo.draw_text("12", 2, 9, 255, 255, 255)

    # Red corner marker
    pixoo.set_pixel(config.size - 1, config.size - 1, 255, 0, 0)

    pixoo.push()
