import unittest

from pydantic import ValidationError

from schnorrsig.config import SchnorrSettings
from schnorrsig.constants import DEFAULT_BITS, HASH_NAME
from schnorrsig.keys import KeyFactory, generate_keypair


class TestKeyFactory(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.factory = KeyFactory(bits=192)

    def test_keypair_invariant(self) -> None:
        params = self.factory.params
        for _ in range(5):
            key = self.factory.generate_keys()
            self.assertTrue(0 <= key.private_key < params.order)
            expected = pow(params.generator, params.order - key.private_key, params.prime)
            self.assertEqual(key.public_key, expected)

    def test_keys_share_parameters(self) -> None:
        first = self.factory.generate_keys()
        second = self.factory.generate_keys()
        self.assertIs(first.params, second.params)
        self.assertNotEqual(first.public_key, second.public_key)

    def test_private_key_hidden_from_repr(self) -> None:
        key = self.factory.generate_keys()
        self.assertNotIn("private_key", repr(key))

    def test_key_methods_sign_and_verify(self) -> None:
        alice = self.factory.generate_keys()
        bob = self.factory.generate_keys()
        signature = alice.sign(b"Hello World")
        self.assertTrue(bob.verify(signature, alice.public_key))
        self.assertFalse(bob.verify(signature, bob.public_key))

    def test_from_params_reuses_group(self) -> None:
        factory = KeyFactory.from_params(self.factory.params, hash_name="sha256")
        self.assertIs(factory.params, self.factory.params)
        key = factory.generate_keys()
        self.assertEqual(key.hash_name, "sha256")
        self.assertTrue(key.verify(key.sign(b"payload"), key.public_key))

    def test_generate_keypair_uses_given_hash(self) -> None:
        key = generate_keypair(self.factory.params, hash_name="sha512")
        self.assertEqual(key.hash_name, "sha512")


class TestSchnorrSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = SchnorrSettings()
        self.assertEqual(settings.bits, DEFAULT_BITS)
        self.assertEqual(settings.hash_name, HASH_NAME)

    def test_hash_name_normalised(self) -> None:
        self.assertEqual(SchnorrSettings(hash_name="SHA256").hash_name, "sha256")

    def test_invalid_values_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            SchnorrSettings(bits=0)
        with self.assertRaises(ValidationError):
            SchnorrSettings(hash_name="not-a-hash")
        with self.assertRaises(ValidationError):
            SchnorrSettings(hash_name="shake_256")

    def test_factory_rejects_invalid_override(self) -> None:
        with self.assertRaises(ValidationError):
            KeyFactory(SchnorrSettings(bits=192), hash_name="not-a-hash")


if __name__ == "__main__":
    unittest.main()
