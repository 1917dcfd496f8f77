#!/usr/bin/env python3
"""
Generate a sample images/ directory for manual encrypt/scan runs.
Files are named 1.png, 2.jpg, ... so the scan naming convention finds them.
"""
import sys
from pathlib import Path

import numpy as np
from PIL import Image

SAMPLES = [
    ("1.png", "PNG"),
    ("2.jpg", "JPEG"),
    ("3.webp", "WEBP"),
    ("4.bmp", "BMP"),
    ("5.gif", "GIF"),
]


def generate_noise(output_path, fmt, width=320, height=240, seed=0):
    """Write a noisy RGB image."""
    print(f"Generating noisy {fmt}: {output_path}")
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)
    img = Image.fromarray(pixels)
    if fmt == "GIF":
        img = img.convert("P")
    img.save(output_path, format=fmt)
    print(f"  ✓ {output_path}")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    target = Path(argv[0]) if argv else Path(__file__).resolve().parent.parent / "images"
    target.mkdir(parents=True, exist_ok=True)

    print(f"Generating sample images in {target}...")
    for seed, (name, fmt) in enumerate(SAMPLES):
        output_path = target / name
        if output_path.exists():
            print(f"Skipping {name} (already exists)")
            continue
        generate_noise(output_path, fmt, seed=seed)

    print("\nVerifying generated images:")
    for name, _ in SAMPLES:
        output_path = target / name
        if output_path.exists():
            size_kb = output_path.stat().st_size / 1024
            print(f"  ✓ {name}: {size_kb:.1f} KB")
        else:
            print(f"  ✗ {name}: NOT FOUND", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
