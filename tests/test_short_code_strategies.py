"""
Tests for short code generation strategies.
"""
import pytest

from shortlink_app.models.link import Link
from shortlink_app.services.exceptions import ShortCodeExhausted
from shortlink_app.services.short_code_strategies import RandomShortCodeStrategy
from shortlink_app.dependencies import get_short_code_strategy


def add_link(db_session, short_code):
    db_session.add(Link(short_code=short_code, original_url="https://example.com/"))
    db_session.commit()


class TestRandomStrategy:
    """Test random generation with collision checking"""

    def test_generates_correct_length(self, db_session):
        strategy = RandomShortCodeStrategy(length=6)

        code = strategy.generate(db_session)

        assert len(code) == 6
        assert code.isalnum()

    def test_uses_alphabet(self, db_session):
        strategy = RandomShortCodeStrategy(length=8, alphabet="xyz")

        code = strategy.generate(db_session)

        assert set(code) <= set("xyz")

    def test_codes_are_unique(self, db_session):
        strategy = RandomShortCodeStrategy(length=6)

        codes = set()
        for _ in range(100):
            code = strategy.generate(db_session)
            add_link(db_session, code)
            codes.add(code)

        assert len(codes) == 100

    def test_widens_after_collisions(self, db_session):
        """With one possible code per length, a taken code forces a longer one"""
        add_link(db_session, "a")
        strategy = RandomShortCodeStrategy(length=1, alphabet="a", max_attempts=3, max_length=2)

        assert strategy.generate(db_session) == "aa"

    def test_exhausted(self, db_session):
        add_link(db_session, "a")
        add_link(db_session, "aa")
        strategy = RandomShortCodeStrategy(length=1, alphabet="a", max_attempts=3, max_length=2)

        with pytest.raises(ShortCodeExhausted):
            strategy.generate(db_session)

    def test_never_widens_without_max_length(self, db_session):
        add_link(db_session, "a")
        strategy = RandomShortCodeStrategy(length=1, alphabet="a", max_attempts=2)

        with pytest.raises(ShortCodeExhausted):
            strategy.generate(db_session)

    def test_skips_reserved(self, db_session):
        strategy = RandomShortCodeStrategy(length=1, alphabet="a", max_length=2, reserved={"a"})

        assert strategy.generate(db_session) == "aa"

    def test_rejects_bad_config(self):
        with pytest.raises(ValueError):
            RandomShortCodeStrategy(length=0)
        with pytest.raises(ValueError):
            RandomShortCodeStrategy(alphabet="")


def test_strategy_from_settings():
    """Dependency builds the configured strategy once"""
    strategy = get_short_code_strategy()

    assert isinstance(strategy, RandomShortCodeStrategy)
    assert strategy is get_short_code_strategy()
    assert "health" in strategy.reserved
