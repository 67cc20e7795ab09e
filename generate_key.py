"""Utility module to generate a SECRET_KEY line for the .env file"""
import argparse
import secrets


def generate_secret_key(nbytes: int = 32) -> str:
    """Return a random hex secret suitable for signing access tokens."""
    return secrets.token_hex(nbytes)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--bytes", type=int, default=32, help="entropy in bytes")
    args = parser.parse_args()
    print(f"SECRET_KEY={generate_secret_key(args.bytes)}")
