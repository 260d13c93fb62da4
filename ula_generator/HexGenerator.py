import random

MAX_GROUP_VALUE = 0xFFFF


class HexGenerator:
    def __init__(self, rng=None):
        # Any object with an inclusive randint(a, b) will do
        self.rng = rng if rng is not None else random

    def generate_hex(self, max_value: int) -> str:
        """Generate a random lowercase hex string with a value between 0 and max_value."""
        if not 0 <= max_value <= MAX_GROUP_VALUE:
            raise ValueError(f"Maximum value {max_value} is outside the 0-{MAX_GROUP_VALUE} range.")

        random_value = self.rng.randint(0, max_value)
        return f"{random_value:x}"


# Example usage
if __name__ == "__main__":
    hex_gen = HexGenerator()
    for _ in range(10):  # Generate 10 hex groups for demonstration
        print(hex_gen.generate_hex(MAX_GROUP_VALUE))
