import unittest

from md5isaac import isaac as isaacmod
from md5isaac.core import to_int32
from md5isaac.errors import InvalidArgumentError, MisuseError
from md5isaac.isaac import RANDSIZ, IsaacContext
from md5isaac.vectors import (
    ISAAC_RANDSEED_KEY,
    isaac_randseed_words,
    isaac_randvect_words,
)

ZERO_SEED = [0] * RANDSIZ


class TestIsaacReferenceVectors(unittest.TestCase):
    def test_randvect_zero_seed(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        ctx.step()
        self.assertEqual([int(v) for v in ctx.results], isaac_randvect_words())

    def test_randvect_first_words(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        ctx.step()
        self.assertEqual(int(ctx.results[0]), 0xF650E4C8)
        self.assertEqual(int(ctx.results[1]), 0xE448E96D)

    def test_randseed_key(self) -> None:
        ref = isaac_randseed_words()
        self.assertEqual(len(ref), RANDSIZ)
        ctx = IsaacContext.from_bytes(ISAAC_RANDSEED_KEY)
        got = [ctx.next_value() for _ in range(RANDSIZ)]
        self.assertEqual(got, ref)
        self.assertEqual(ctx.generations, 1)

    def test_vector_tables_are_full_batches(self) -> None:
        self.assertEqual(len(isaac_randvect_words()), RANDSIZ)
        self.assertEqual(len(isaac_randseed_words()), RANDSIZ)

    def test_first_value_is_top_of_init_batch(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        self.assertEqual(ctx.count, RANDSIZ)
        self.assertEqual(ctx.next_value(), 0x182600F3)
        self.assertEqual(ctx.next_value(), 0x300B4A8D)
        self.assertEqual(ctx.next_value(), 0x301B6622)
        self.assertEqual(int(ctx.results[0]), 0xE76DD339)

    def test_default_initialisation(self) -> None:
        ctx = IsaacContext()
        self.assertEqual(int(ctx.results[0]), 0x9FC09148)
        self.assertEqual(int(ctx.results[1]), 0xF989E740)
        self.assertEqual(ctx.next_value(), 0x71D71FD2)
        self.assertEqual(ctx.next_value(), 0xB54ADAE7)


class TestIsaacExtraction(unittest.TestCase):
    def test_257_values_cross_one_regeneration(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        self.assertEqual(ctx.generations, 1)
        first_batch = [int(v) for v in ctx.results]
        values = [ctx.next_value() for _ in range(257)]
        self.assertEqual(ctx.generations, 2)
        self.assertEqual(values[:256], first_batch[::-1])
        self.assertEqual(values[256], int(ctx.results[RANDSIZ - 1]))
        self.assertEqual(values[256], isaac_randvect_words()[RANDSIZ - 1])
        self.assertEqual(ctx.count, RANDSIZ - 1)

    def test_exactly_one_regeneration_per_batch(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        for _ in range(256 * 3):
            ctx.next_value()
        self.assertEqual(ctx.generations, 3)
        self.assertEqual(ctx.count, 0)
        ctx.next_value()
        self.assertEqual(ctx.generations, 4)

    def test_step_rewinds_to_top(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        ctx.next_value()
        ctx.step()
        self.assertEqual(ctx.count, RANDSIZ)
        self.assertEqual(ctx.next_value(), isaac_randvect_words()[RANDSIZ - 1])

    def test_determinism(self) -> None:
        seed = [(i * 0x01000193) & 0xFFFFFFFF for i in range(RANDSIZ)]
        a = IsaacContext(seed)
        b = IsaacContext(seed)
        self.assertEqual([a.next_value() for _ in range(600)], [b.next_value() for _ in range(600)])

    def test_different_seeds_differ(self) -> None:
        a = IsaacContext(ZERO_SEED)
        b = IsaacContext(list(range(RANDSIZ)))
        self.assertNotEqual(a.next_value(), b.next_value())

    def test_reseed_resets_sequence(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        first = [ctx.next_value() for _ in range(300)]
        ctx.seed(ZERO_SEED)
        self.assertEqual(ctx.generations, 1)
        self.assertEqual([ctx.next_value() for _ in range(300)], first)

    def test_next_int32(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        ctx.count = 1
        ctx.results[0] = 0xFFFFFFFF
        self.assertEqual(ctx.next_int32(), -1)


class TestIsaacFillBuffer(unittest.TestCase):
    def test_byte_order_little_endian(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        buf = bytearray(8)
        ctx.fill_buffer(buf)
        self.assertEqual(bytes(buf), bytes.fromhex("f3002618" "8d4a0b30"))

    def test_partial_word_truncated(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        buf = bytearray(b"\xaa" * 10)
        ctx.fill_buffer(buf, 6)
        self.assertEqual(bytes(buf[:6]), bytes.fromhex("f3002618" "8d4a"))
        self.assertEqual(bytes(buf[6:]), b"\xaa" * 4)
        # the truncated word was consumed
        self.assertEqual(ctx.next_value(), 0x301B6622)

    def test_exact_lengths(self) -> None:
        for n in (0, 1, 2, 3, 5, 1023, 1025):
            ctx = IsaacContext(ZERO_SEED)
            self.assertEqual(len(ctx.random_bytes(n)), n)

    def test_long_fill_matches_values(self) -> None:
        a = IsaacContext(ZERO_SEED)
        b = IsaacContext(ZERO_SEED)
        data = a.random_bytes(4 * 300)
        expected = b"".join(b.next_value().to_bytes(4, "little") for _ in range(300))
        self.assertEqual(data, expected)

    def test_fill_arguments(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        with self.assertRaises(InvalidArgumentError):
            ctx.fill_buffer(None, 4)
        with self.assertRaises(InvalidArgumentError):
            ctx.fill_buffer(bytearray(3), 4)
        with self.assertRaises(InvalidArgumentError):
            ctx.fill_buffer(b"read-only")
        with self.assertRaises(InvalidArgumentError):
            ctx.random_bytes(-1)
        ctx.fill_buffer(None, 0)
        self.assertEqual(ctx.count, RANDSIZ)


class TestIsaacLifecycle(unittest.TestCase):
    def test_seed_validation(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            IsaacContext([0] * 255)
        with self.assertRaises(InvalidArgumentError):
            IsaacContext([0] * 255 + [1 << 32])
        with self.assertRaises(InvalidArgumentError):
            IsaacContext([0] * 255 + [-1])
        with self.assertRaises(InvalidArgumentError):
            IsaacContext(b"\x00" * 1024)
        with self.assertRaises(InvalidArgumentError):
            IsaacContext.from_bytes(b"\x00" * 1025)

    def test_free_once(self) -> None:
        ctx = IsaacContext(ZERO_SEED)
        ctx.free()
        self.assertTrue(ctx.freed)
        self.assertFalse(ctx.results.any())
        self.assertFalse(ctx.pool.any())
        with self.assertRaises(MisuseError):
            ctx.free()
        with self.assertRaises(MisuseError):
            ctx.next_value()
        with self.assertRaises(MisuseError):
            ctx.step()
        with self.assertRaises(MisuseError):
            ctx.fill_buffer(bytearray(4))
        with self.assertRaises(MisuseError):
            ctx.seed(ZERO_SEED)

    def test_context_manager_frees(self) -> None:
        with IsaacContext(ZERO_SEED) as ctx:
            ctx.next_value()
        self.assertTrue(ctx.freed)

    def test_call_style_interface(self) -> None:
        ctx = isaacmod.isaac_init()
        isaacmod.isaac_seed(ctx, ZERO_SEED)
        isaacmod.isaac_step(ctx)
        self.assertEqual(isaacmod.isaac_long(ctx), to_int32(isaac_randvect_words()[RANDSIZ - 1]))
        buf = bytearray(3)
        isaacmod.isaac_buff(ctx, buf, 3)
        self.assertEqual(bytes(buf), isaac_randvect_words()[RANDSIZ - 2].to_bytes(4, "little")[:3])
        isaacmod.isaac_free(ctx)
        with self.assertRaises(MisuseError):
            isaacmod.isaac_free(ctx)
        for fn, args in (
            (isaacmod.isaac_seed, (ZERO_SEED,)),
            (isaacmod.isaac_step, ()),
            (isaacmod.isaac_long, ()),
            (isaacmod.isaac_buff, (bytearray(4), 4)),
            (isaacmod.isaac_free, ()),
        ):
            with self.assertRaises(InvalidArgumentError):
                fn(None, *args)


if __name__ == "__main__":
    unittest.main()
