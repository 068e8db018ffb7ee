#!/usr/bin/env python3
"""
Basic usage examples for the Pixoo client library.
"""

import logging
import time

from pixoo import PixooClient, ConfigError, TransmissionError, load_config


logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

try:
    CONFIG = load_config()
except ConfigError as e:
    print(f"Error: {e}")
    print("Create a .env file with the following content:")
    print("PIXOO_ADDRESS=your_device_ip")
    print("PIXOO_SIZE=64")
    exit(1)


def example_colors():
    """Cycle through a few solid colors."""
    with PixooClient.from_config(CONFIG) as pixoo:
        for color in [(255, 0, 0), (0, 255, 0), (0, 0, 255)]:
            pixoo.fill(*color)
            pixoo.push()
            time.sleep(1)


def example_text():
    """Draw text over a background."""
    with PixooClient.from_config(CONFIG) as pixoo:
        pixoo.fill(32, 0, 32)

        # Glyphs only paint their lit cells, so the background shows through
        text = "PIXOO" if pixoo.size >= 20 else "HI"
        x = pixoo.draw_text(text, 1, 1, 255, 255, 255)
        if x + 3 <= pixoo.size:
            pixoo.draw_character("!", x, 1, 255, 0, 0)

        pixoo.push()


def example_checkerboard():
    """Draw a checkerboard pixel by pixel."""
    with PixooClient.from_config(CONFIG) as pixoo:
        for y in range(pixoo.size):
            for x in range(pixoo.size):
                if (x + y) % 2 == 0:
                    pixoo.set_pixel(x, y, 255, 255, 255)
                else:
                    pixoo.set_pixel(x, y, 0, 0, 0)

        pixoo.push()


def example_counter():
    """Count up, pushing a new frame every second."""
    with PixooClient.from_config(CONFIG) as pixoo:
        for i in range(10):
            pixoo.clear()
            pixoo.draw_text(str(i), 1, 1, 0, 255, 0)
            try:
                pixoo.push()
            except TransmissionError as e:
                # The next push still gets a fresh frame id
                print(f"Frame {i} was not delivered: {e}")
            time.sleep(1)


def example_power():
    """Dim the screen, switch it off and back on."""
    with PixooClient.from_config(CONFIG) as pixoo:
        pixoo.set_brightness(20)
        pixoo.turn_off()
        time.sleep(2)
        pixoo.turn_on()
        pixoo.set_brightness(80)
        pixoo.reset()


if __name__ == "__main__":
    print("Running Pixoo client examples...")

    try:
        print("\nExample 1: Colors")
        example_colors()

        print("\nExample 2: Text")
        example_text()

        print("\nExample 3: Checkerboard")
        example_checkerboard()

        print("\nExample 4: Counter")
        example_counter()

        print("\nExample 5: Power")
        example_power()

        print("\nAll examples completed successfully!")

    except KeyboardInterrupt:
        print("\nExamples stopped by user")
    except Exception as e:
        print(f"\nError: {e}")
