import argparse
import os
import random
import sys
from typing import ClassVar, Optional

import rtoml

from ula_generator.IPv6Generator import PrivateIPv6Generator
from ula_generator.validator import is_valid_private_ipv6

CONFIG_NAME = "generator"
DEFAULT_COUNT = 1
DEFAULT_OUTPUT_FORMAT = "toml"
FORMATS = ["toml", "csv"]


class AddressGenerator:
    """Generate, validate and save batches of private IPv6 /64 addresses."""

    DEFAULTS: ClassVar[dict] = {
        "count": DEFAULT_COUNT,
        "seed": None,
        "output_format": DEFAULT_OUTPUT_FORMAT,
    }

    # Expected type of each config value, csv values arrive as strings and are converted
    TYPES: ClassVar[dict] = {
        "count": int,
        "seed": int,
        "output_format": str,
    }

    def __init__(self, seed: Optional[int] = None, config_path: Optional[str] = None, config_format: str = "toml"):
        """
        Initialize the generator with configuration options.
        Args:
            seed: Seed for a private random source (default: value from config, else unseeded)
            config_path: Path to configuration directory (default: current working directory)
            config_format: Format of config files ("toml" or "csv")
        """
        self.config_path = config_path or os.getcwd()
        self.config_format = config_format
        self.config = self._load_config()
        if seed is not None:
            self.config["seed"] = seed

        if self.config["seed"] is None:
            rng = random
        else:
            rng = random.Random(self.config["seed"])
        self.ipv6_generator = PrivateIPv6Generator(rng)
        self.addresses = []

    def _load_config(self) -> dict:
        """Load configuration from generator.toml or generator.csv, falling back to defaults."""
        config = dict(self.DEFAULTS)
        file_path = os.path.join(self.config_path, f"{CONFIG_NAME}.{self.config_format}")

        if not os.path.exists(file_path):
            return config

        try:
            if self.config_format == "toml":
                with open(file_path) as f:
                    loaded = rtoml.load(f)
            else:  # csv format
                loaded = {}
                with open(file_path) as f:
                    for line in f:
                        if line.strip():
                            key, value = line.strip().split(",", 1)
                            loaded[key.strip()] = value.strip()
        except (OSError, ValueError) as e:
            print(f"Error reading {self.config_format} file {file_path}: {e}", file=sys.stderr)
            return config

        for key, value in loaded.items():
            if key not in self.TYPES:
                continue
            expected = self.TYPES[key]
            if self.config_format == "csv":
                try:
                    value = expected(value)
                except ValueError:
                    raise ValueError(f"Invalid value for '{key}' in {file_path}: {value!r}")
            # bool is a subclass of int, reject it explicitly
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ValueError(f"Invalid value for '{key}' in {file_path}: {value!r}")
            config[key] = value

        if config["output_format"] not in FORMATS:
            raise ValueError(f"Unsupported output_format in {file_path}: {config['output_format']!r}")
        return config

    def generate(self, count: Optional[int] = None) -> list:
        """Generate a batch of addresses and remember them for saving."""
        if count is None:
            count = self.config["count"]
        if count < 1:
            raise ValueError(f"Address count must be at least 1, got {count}.")

        batch = [self.ipv6_generator.generate_private_ipv6() for _ in range(count)]
        self.addresses.extend(batch)
        return batch

    @staticmethod
    def validate(addresses: list) -> list:
        """Pair each address with its validation verdict."""
        return [(address, is_valid_private_ipv6(address)) for address in addresses]

    def save_addresses(self, file_path: str, format_type: Optional[str] = None) -> None:
        """
        Save the generated addresses to a file in specified format.

        Args:
            file_path: Path to the output file
            format_type: File format ("toml" or "csv"), defaults to the configured output_format
        """
        format_type = format_type or self.config["output_format"]
        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        if format_type == "toml":
            with open(file_path, "w") as f:
                rtoml.dump({"addresses": self.addresses}, f)
        else:  # csv format
            with open(file_path, "w") as f:
                for address in self.addresses:
                    f.write(f"{address}\n")


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="""
        Generate random private (unique local) IPv6 addresses with /64 CIDR notation,
        or validate existing ones. Prints a single address when run without options.
        Can be configured using either TOML or CSV configuration files.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("-n", "--count",
                        type=int,
                        help="Number of addresses to generate (default: from config, else 1)")

    parser.add_argument("-s", "--seed",
                        type=int,
                        help="Seed the random source for reproducible output")

    parser.add_argument("--validate",
                        nargs="+",
                        metavar="ADDRESS",
                        help="Validate the given addresses instead of generating (cannot be combined with generation options)")

    parser.add_argument("-o", "--output",
                        help="Also save the generated addresses to this file")

    parser.add_argument("-f", "--output-format",
                        choices=FORMATS,
                        help="Output file format (default: from config, else toml)")

    parser.add_argument("-c", "--config-path",
                        help="Path to directory containing config files (default: current directory)")

    parser.add_argument("--config-format",
                        choices=FORMATS,
                        default="toml",
                        help="Configuration file format (default: toml)")

    parser.add_argument("-v", "--verbose",
                        action="store_true",
                        help="Increase output verbosity")

    args = parser.parse_args(argv)

    if args.validate:
        generation_options = {
            "--count": args.count,
            "--seed": args.seed,
            "--output": args.output,
            "--output-format": args.output_format,
        }
        used = [name for name, value in generation_options.items() if value is not None]
        if used:
            parser.error(f"--validate cannot be combined with {', '.join(used)}")

        results = AddressGenerator.validate(args.validate)
        for address, valid in results:
            print(f"{address}: {'valid' if valid else 'invalid'}")
        return 0 if all(valid for _, valid in results) else 1

    try:
        generator = AddressGenerator(
            seed=args.seed,
            config_path=args.config_path,
            config_format=args.config_format
        )
        addresses = generator.generate(args.count)
    except ValueError as e:
        parser.error(str(e))

    if args.verbose:
        print(f"Using config path: {generator.config_path}", file=sys.stderr)
        print(f"Using config format: {generator.config_format}", file=sys.stderr)
        print(f"Using seed: {generator.config['seed']}", file=sys.stderr)

    for address in addresses:
        print(address)

    if args.output:
        format_type = args.output_format or generator.config["output_format"]
        generator.save_addresses(args.output, format_type)
        if args.verbose:
            print(f"Addresses saved as {args.output} ({format_type})", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
