from ula_generator.HexGenerator import MAX_GROUP_VALUE, HexGenerator

PRIVATE_PREFIX = "fd"
CIDR_SUFFIX = ":/64"
MAX_BYTE_VALUE = 0xFF
GROUP_COUNT = 4


def build_private_ipv6(first_byte: int, group2: int, group3: int, group4: int) -> str:
    """Build a private IPv6 /64 address from explicit byte and group values."""
    if not 0 <= first_byte <= MAX_BYTE_VALUE:
        raise ValueError(f"first_byte {first_byte} is outside the 0-{MAX_BYTE_VALUE} range.")
    for name, value in (("group2", group2), ("group3", group3), ("group4", group4)):
        if not 0 <= value <= MAX_GROUP_VALUE:
            raise ValueError(f"{name} {value} is outside the 0-{MAX_GROUP_VALUE} range.")

    # First group is "fd" followed by the byte, always two digits
    groups = [f"{PRIVATE_PREFIX}{first_byte:02x}"]
    groups.extend(f"{value:x}" for value in (group2, group3, group4))
    return ":".join(groups) + CIDR_SUFFIX


class PrivateIPv6Generator:
    def __init__(self, rng=None):
        self.hex_generator = HexGenerator(rng)

    def generate_private_ipv6(self) -> str:
        """Generate a random private IPv6 address with /64 CIDR notation."""
        first_byte = int(self.hex_generator.generate_hex(MAX_BYTE_VALUE), 16)
        groups = [
            int(self.hex_generator.generate_hex(MAX_GROUP_VALUE), 16)
            for _ in range(GROUP_COUNT - 1)
        ]
        return build_private_ipv6(first_byte, *groups)


# Example usage: python -m ula_generator.IPv6Generator
if __name__ == "__main__":
    ipv6_gen = PrivateIPv6Generator()
    for _ in range(10):  # Generate 10 IPv6 addresses for demonstration
        print(ipv6_gen.generate_private_ipv6())
