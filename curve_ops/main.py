from . import secp256k1_curve
from .crypto_utils import encoding

# ============================================================================
# DEMO CONFIGURATION
# ============================================================================

# Matches the example in "Mastering Bitcoin", page 78
PRIVATE_KEY = "0x3aba4162c7251c891207b747840551a71939b0de081f85c4e44cf7c13e41daa6"

# Matches https://bitcoin.stackexchange.com/questions/25024/how-do-you-get-a-bitcoin-public-key-from-a-private-key
# PRIVATE_KEY = "0x18E14A7B6A307F426A94F8114701E7C8E774E7F9A47E2C2035DB29A206321725"

# Matches https://asecuritysite.com/encryption/bit_keys
# PRIVATE_KEY = "0xd8a8bb5aa721409deb930e8c2278b444d1bdb0f0a8a6e8cb97ec0ea9167175c5"

# ============================================================================


def main():
    curve = secp256k1_curve.SECP256K1
    generator = secp256k1_curve.G

    if curve.verify(generator):
        print("generator point is on elliptic curve")
    else:
        print("generator point is NOT on elliptic curve")

    private_key = encoding.parse_int(PRIVATE_KEY)
    public_key = curve.scalar_mult(private_key, generator)

    status = (
        "pubkey point is on elliptic curve"
        if curve.verify(public_key)
        else "pubkey is NOT on elliptic curve"
    )
    print(f"privkey={private_key} public key=> {encoding.format_point(public_key)} {status}")
    if not public_key.is_infinity:
        print(f"x: {encoding.int_to_hex(public_key.x)}")
        print(f"y: {encoding.int_to_hex(public_key.y)}")


if __name__ == "__main__":
    main()
