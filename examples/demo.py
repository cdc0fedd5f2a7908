"""
rsa_oaep_bridge — Live Demo
===========================
Run:  python examples/demo.py

Walks through the three host calls plus the failure cases a host
has to handle, printing timings and sizes.
"""

import sys, os, time, base64, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rsa_oaep_bridge import generate_keys, encrypt, decrypt

LINE = "═" * 70
MSG  = "Meet at the north gate at nine."

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.WARNING, format=" %(message)s")

print(f"\n{LINE}")
print("  rsa_oaep_bridge — RSA-2048 + OAEP (SHA-256) Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── Key generation ───────────────────────────────────────────────────────────
header("generate_keys()")
t0   = time.perf_counter()
keys = generate_keys().to_dict()
elapsed = time.perf_counter() - t0
ok("Private key", keys["privateKey"].splitlines()[0])
ok("Public key",  keys["publicKey"].splitlines()[0])
ok("Keygen",      f"{elapsed*1000:.1f} ms")

# ── Encrypt / decrypt ────────────────────────────────────────────────────────
header("encrypt() / decrypt()")
ct1 = encrypt(keys["publicKey"], MSG).to_dict()["ciphertext"]
ct2 = encrypt(keys["publicKey"], MSG).to_dict()["ciphertext"]
pt  = decrypt(keys["privateKey"], ct1).to_dict()["plaintext"]
ok("Ciphertext size", f"{len(base64.b64decode(ct1))} bytes")
ok("Randomised",      str(ct1 != ct2))
ok("Decrypted",       pt)

# ── Failures ─────────────────────────────────────────────────────────────────
header("Failure results")
ok("190 bytes", str(encrypt(keys["publicKey"], "x" * 190).ok))
ok("191 bytes", encrypt(keys["publicKey"], "x" * 191).to_dict()["error"])
ok("Bad armor", decrypt("not a pem block", ct1).to_dict()["error"])
ok("Wrong key type", encrypt(keys["privateKey"], "hi").to_dict()["error"])
other = generate_keys().to_dict()
ok("Other private key", decrypt(other["privateKey"], ct1).to_dict()["error"])
print(f"\n{LINE}\n")
