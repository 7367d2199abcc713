import numpy as np
import pytest

from lab_config import CONGRUENTIAL_PARAMS
from maclaren_marsaglia import maclaren_marsaglia
from uniform_streams import MultiplicativeCongruential, PlatformUniform


class TestMultiplicativeCongruential:

    def test_first_values(self):
        gen = MultiplicativeCongruential(seed=3, multiplier=5, modulus=16)
        # 3, 15, 11, 7, 3, ...
        assert gen.generate(5).tolist() == [3 / 16, 15 / 16, 11 / 16, 7 / 16, 3 / 16]

    def test_deterministic(self):
        gen = MultiplicativeCongruential(**CONGRUENTIAL_PARAMS)
        a = gen.generate(1000)
        b = gen.generate(1000)
        assert np.array_equal(a, b)
        assert np.array_equal(a, MultiplicativeCongruential().generate(1000))

    def test_range(self):
        sample = MultiplicativeCongruential().generate(5000)
        assert np.all(sample >= 0.0)
        assert np.all(sample < 1.0)

    def test_no_overflow_with_large_states(self):
        m = 2**31
        gen = MultiplicativeCongruential(seed=m - 1, multiplier=m - 3, modulus=m)
        expected = ((m - 3) * (m - 1)) % m / m
        assert gen.generate(2)[1] == expected

    def test_draw_matches_generate(self):
        gen = MultiplicativeCongruential()
        streamed = [gen.draw() for _ in range(10)] + gen.draw(10).tolist()
        assert streamed == gen.generate(20).tolist()

    def test_reset(self):
        gen = MultiplicativeCongruential()
        first = gen.draw(5)
        gen.reset()
        assert np.array_equal(first, gen.draw(5))

    def test_sample_is_read_only(self):
        sample = MultiplicativeCongruential().generate(10)
        with pytest.raises(ValueError):
            sample[0] = 0.5

    def test_empty_and_negative(self):
        gen = MultiplicativeCongruential()
        assert len(gen.generate(0)) == 0
        with pytest.raises(ValueError):
            gen.generate(-1)

    @pytest.mark.parametrize("kwargs", [
        {"modulus": 1},
        {"multiplier": 0},
        {"seed": 0},
        {"seed": 2**31},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            MultiplicativeCongruential(**kwargs)


class TestPlatformUniform:

    def test_range(self):
        sample = PlatformUniform(seed=1).generate(10_000)
        assert sample.min() >= 0.0
        assert sample.max() < 1.0

    def test_seeded_reproducibility(self):
        assert np.array_equal(PlatformUniform(42).generate(100), PlatformUniform(42).generate(100))

    def test_draw_scalar(self):
        value = PlatformUniform(0).draw()
        assert isinstance(value, float)
        assert 0.0 <= value < 1.0


class TestMacLarenMarsaglia:

    def test_length(self):
        a = MultiplicativeCongruential().generate(1000)
        b = PlatformUniform(3).generate(900)
        assert len(maclaren_marsaglia(a, b, 32)) == 900 - 32

    def test_outputs_come_from_first(self):
        a = MultiplicativeCongruential().generate(500)
        b = PlatformUniform(5).generate(500)
        combined = maclaren_marsaglia(a, b, 16)
        assert set(combined.tolist()) <= set(a.tolist())

    def test_hand_computed(self):
        first = [0.1, 0.2, 0.3, 0.4, 0.5]
        second = [0.9, 0.0, 0.6, 0.6]
        # v = [0.1, 0.2]; s = 1 -> 0.2, v = [0.1, 0.3]; s = 0 -> 0.1, v = [0.4, 0.3]
        assert maclaren_marsaglia(first, second, 2).tolist() == [0.2, 0.1]

    def test_selector_clamped(self):
        combined = maclaren_marsaglia([0.1, 0.2, 0.3], [1.0, 1.0, 1.0], 2)
        assert combined.tolist() == [0.2]

    @pytest.mark.parametrize("k", [0, 10, 11])
    def test_empty_when_k_does_not_fit(self, k):
        a = np.linspace(0, 0.9, 10)
        assert len(maclaren_marsaglia(a, a, k)) == 0

    def test_inputs_untouched(self):
        a = np.linspace(0, 0.99, 100)
        b = a[::-1].copy()
        a_copy, b_copy = a.copy(), b.copy()
        maclaren_marsaglia(a, b, 8)
        assert np.array_equal(a, a_copy)
        assert np.array_equal(b, b_copy)
