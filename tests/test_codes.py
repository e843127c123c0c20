"""Tests for short code generation."""

import random

from shortlinks.codes import ShortCodeGenerator, generate_short_code, generate_custom_code


ALPHANUMERIC = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")


class TestShortCodeGenerator:
    """Test short code generation."""
    
    def test_generate_random(self):
        """Test random code generation."""
        generator = ShortCodeGenerator(default_length=6)
        
        code = generator.generate_random()
        assert len(code) == 6
        assert set(code) <= ALPHANUMERIC
    
    def test_generate_random_custom_length(self):
        generator = ShortCodeGenerator(default_length=6)
        
        for length in [3, 5, 8, 10, 15]:
            code = generator.generate_random(length=length)
            assert len(code) == length
            assert generator.is_valid_format(code)
    
    def test_zero_length_is_empty(self):
        generator = ShortCodeGenerator(default_length=6)
        assert generator.generate_random(length=0) == ""
        assert generate_custom_code(0) == ""
    
    def test_package_exports_generators(self):
        import shortlinks
        
        assert shortlinks.generate_custom_code is generate_custom_code
        assert len(shortlinks.generate_custom_code(9)) == 9
        assert "generate_custom_code" in shortlinks.__all__
    
    def test_default_length_helper(self):
        code = generate_short_code()
        assert len(code) == 6
        assert set(code) <= ALPHANUMERIC
    
    def test_codes_are_mostly_unique(self):
        codes = {generate_short_code() for _ in range(100)}
        assert len(codes) > 95
    
    def test_seeded_rng_is_reproducible(self):
        first = ShortCodeGenerator(rng=random.Random(42))
        second = ShortCodeGenerator(rng=random.Random(42))
        
        assert [first.generate_random() for _ in range(5)] == [second.generate_random() for _ in range(5)]
    
    def test_is_valid_format(self):
        """Test format validation."""
        assert ShortCodeGenerator.is_valid_format("abc123")
        assert ShortCodeGenerator.is_valid_format("ABCxyz")
        
        assert not ShortCodeGenerator.is_valid_format("abc 123")
        assert not ShortCodeGenerator.is_valid_format("abc-123")
        assert not ShortCodeGenerator.is_valid_format("abc@123")
