#!/usr/bin/env python3
"""
Synthetic text generator for uppercase counter benchmarks.

Writes a file of random printable ASCII words of roughly the requested size
and reports the exact number of uppercase letters written, so a counting run
over the file can be checked against a known answer.
"""

import argparse
import random
import string
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

# Characters written per generated block before flushing to the file
BLOCK_SIZE = 64 * 1024

LOWER_CHARS = string.ascii_lowercase + string.digits + ",.;:'!?-"


def generate_block(size: int, upper_ratio: float, rng: random.Random) -> tuple[str, int]:
    """
    Generate one block of text of exactly ``size`` characters.

    Roughly every seventh character is a space or newline; the remaining
    characters are uppercase with probability ``upper_ratio``.

    Returns:
        Tuple of (text, number of uppercase letters in text).
    """
    chars = []
    uppercase = 0
    for _ in range(size):
        roll = rng.random()
        if roll < 1 / 7:
            chars.append("\n" if roll < 1 / 70 else " ")
        elif rng.random() < upper_ratio:
            chars.append(rng.choice(string.ascii_uppercase))
            uppercase += 1
        else:
            chars.append(rng.choice(LOWER_CHARS))
    return "".join(chars), uppercase


def generate_synthetic_text(
    output_path: str,
    size_bytes: int,
    upper_ratio: float,
    seed: int,
) -> int:
    """
    Generate a synthetic text file of exactly ``size_bytes`` bytes.

    Streams output block by block to avoid holding the file in memory.

    Returns:
        Total number of uppercase letters written.
    """
    rng = random.Random(seed)
    total_uppercase = 0
    written = 0

    with open(output_path, "w", encoding="ascii", newline="", buffering=BUFFER_SIZE) as f:
        while written < size_bytes:
            block_size = min(BLOCK_SIZE, size_bytes - written)
            text, uppercase = generate_block(block_size, upper_ratio, rng)
            f.write(text)
            written += block_size
            total_uppercase += uppercase

            # Progress indicator every 64 blocks
            if written % (64 * BLOCK_SIZE) == 0:
                print(f"  Generated {written:,}/{size_bytes:,} bytes...", file=sys.stderr)

    return total_uppercase


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate synthetic text for uppercase counting.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate ~100MB of text
  python generate_synthetic_text.py --out data/synthetic.txt --size 100000000

  # Mostly uppercase text
  python generate_synthetic_text.py --out data/shouting.txt --size 1000000 --upper-ratio 0.9
""",
    )

    parser.add_argument(
        "--out",
        required=True,
        help="Output file path",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=10_000_000,
        help="Output size in bytes (default: 10000000)",
    )
    parser.add_argument(
        "--upper-ratio",
        type=float,
        default=0.1,
        help="Probability that a non-space character is uppercase (default: 0.1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    # Validate
    if args.size < 0:
        parser.error("--size must be non-negative")
    if not 0.0 <= args.upper_ratio <= 1.0:
        parser.error("--upper-ratio must be between 0 and 1")

    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Size: {args.size:,} bytes", file=sys.stderr)
    print(f"Uppercase ratio: {args.upper_ratio}", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)

    total_uppercase = generate_synthetic_text(
        output_path=args.out,
        size_bytes=args.size,
        upper_ratio=args.upper_ratio,
        seed=args.seed,
    )

    print(f"Done! Wrote {args.size:,} bytes to {args.out}", file=sys.stderr)
    print(f"Expected count: {total_uppercase}")


if __name__ == "__main__":
    main()
