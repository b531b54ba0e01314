"""
Тесты для модели Version

Проверяет:
1. Конструкторы и accessors (отсутствующие minor/patch = 0)
2. Мягкий и строгий рендеринг
3. Сравнение (build metadata игнорируется, pre-release как строка)
4. Инкременты и copy-on-write
5. Immutability (frozen=True)
"""

import itertools

import pytest
from pydantic import ValidationError

from verlib.core.domain import (
    UINT64_MAX,
    StrictVersionError,
    Version,
    new_prerelease_version,
    new_version,
)
from verlib.core.parsing import must_parse_version, parse_semver


# =============================================================================
# КОНСТРУКТОРЫ И ACCESSORS
# =============================================================================


class TestConstructors:
    """Тесты для new_version / new_prerelease_version"""

    def test_new_version(self) -> None:
        """Все компоненты указаны, метки пустые"""
        v = new_version(1, 2, 3)

        assert v.major == 1
        assert v.minor == 2
        assert v.patch == 3
        assert v.pre_release == ""
        assert v.build_metadata == ""
        assert v.has_minor
        assert v.has_patch

    def test_new_prerelease_version(self) -> None:
        """Pre-release метка сохраняется"""
        v = new_prerelease_version(1, 2, 3, "alpha")

        assert (v.major, v.minor, v.patch) == (1, 2, 3)
        assert v.pre_release == "alpha"
        assert v.build_metadata == ""

    def test_missing_components_default_to_zero(self) -> None:
        """Отсутствующие minor/patch читаются как 0"""
        v = Version(major=7)

        assert v.minor == 0
        assert v.patch == 0
        assert not v.has_minor
        assert not v.has_patch
        assert v.minor_number is None

    def test_uint64_bounds(self) -> None:
        """Компоненты ограничены диапазоном unsigned 64-bit"""
        assert new_version(UINT64_MAX, UINT64_MAX, UINT64_MAX).major == UINT64_MAX

        with pytest.raises(ValidationError):
            new_version(UINT64_MAX + 1, 0, 0)

        with pytest.raises(ValidationError):
            new_version(-1, 0, 0)


class TestImmutability:
    """Тесты неизменяемости и copy-on-write"""

    def test_frozen(self) -> None:
        """Присваивание полю запрещено"""
        v = new_version(1, 2, 3)

        with pytest.raises(ValidationError):
            v.major = 2

    def test_with_pre_release_returns_copy(self) -> None:
        """with_pre_release не изменяет исходную версию"""
        v = new_version(1, 2, 3)
        beta = v.with_pre_release("beta")

        assert beta.pre_release == "beta"
        assert v.pre_release == ""

    def test_with_build_metadata_returns_copy(self) -> None:
        """with_build_metadata не изменяет исходную версию"""
        v = new_version(1, 2, 3)
        built = v.with_build_metadata("2023.07.27")

        assert built.build_metadata == "2023.07.27"
        assert v.build_metadata == ""

    def test_increment_does_not_touch_original(self) -> None:
        v = must_parse_version("1.2.3-rc.1+build")
        v.increment()
        v.increment_major()
        v.increment_minor()
        v.increment_patch()
        v.increment_pessimistic()

        assert v.lenient_string() == "1.2.3-rc.1+build"


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


class TestRendering:
    """Тесты для lenient_string / strict_string"""

    def test_lenient_string_full(self) -> None:
        v = new_version(1, 2, 3).with_pre_release("alpha").with_build_metadata("2023.07.27")

        assert v.lenient_string() == "1.2.3-alpha+2023.07.27"
        assert str(v) == "1.2.3-alpha+2023.07.27"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1", "1"),
            ("1.2", "1.2"),
            ("1.2.3", "1.2.3"),
            ("v1-rc", "1-rc"),
            ("1+meta", "1+meta"),
        ],
    )
    def test_lenient_string_keeps_only_present_components(self, text: str, expected: str) -> None:
        """Мягкая строка выводит только указанные компоненты"""
        assert must_parse_version(text).lenient_string() == expected

    def test_lenient_string_patch_requires_minor(self) -> None:
        """Patch без minor не выводится"""
        assert Version(major=1, patch=5).lenient_string() == "1"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1-alpha+foo", "1.0.0-alpha+foo"),
            ("1.2", "1.2.0"),
            ("2.1-alpha", "2.1.0-alpha"),
            ("3.4.5", "3.4.5"),
        ],
    )
    def test_strict_string(self, text: str, expected: str) -> None:
        """Строгая строка всегда содержит major.minor.patch"""
        assert must_parse_version(text).strict_string() == expected

    @pytest.mark.parametrize("text", ["1.0.0-alpha..", "1.0.0-01", "1.0.0-alpha_beta"])
    def test_strict_string_invalid_pre_release(self, text: str) -> None:
        """Невалидная pre-release метка → StrictVersionError"""
        with pytest.raises(StrictVersionError, match="pre-release label invalid"):
            must_parse_version(text).strict_string()

    @pytest.mark.parametrize("text", ["1.0.0+_", "1.0.0+a..b", "9.8.7+meta+meta"])
    def test_strict_string_invalid_build_metadata(self, text: str) -> None:
        """Невалидная build metadata → StrictVersionError"""
        with pytest.raises(StrictVersionError, match="build metadata invalid"):
            must_parse_version(text).strict_string()

    def test_strict_round_trip(self) -> None:
        """strict_string → parse_semver воспроизводит исходную версию"""
        versions = [
            new_version(0, 0, 0),
            new_version(1, 2, 3),
            new_version(UINT64_MAX, 0, 1),
            new_prerelease_version(1, 0, 0, "rc.1"),
            new_prerelease_version(2, 0, 0, "alpha-1").with_build_metadata("sha.5114f85"),
        ]

        for v in versions:
            assert parse_semver(v.strict_string()) == v


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestComparison:
    """Тесты для less / greater / equal / greater_equal / less_equal"""

    @pytest.mark.parametrize(
        "left, right, expected",
        [
            ("1.2", "2.1", True),
            ("2.1", "2.1.0", False),
            ("2.1-alpha", "2.1", True),
            ("2.1", "2.1-alpha", False),
            ("3.4.5", "3.4", False),
            ("1.0.0-alpha", "1.0.0-beta", True),
            ("1.9.9", "1.10.0", True),
        ],
    )
    def test_less(self, left: str, right: str, expected: bool) -> None:
        assert must_parse_version(left).less(must_parse_version(right)) is expected

    def test_missing_components_equal_zero(self) -> None:
        """Версии 1 и 1.0.0 семантически равны, но структурно различаются"""
        short = must_parse_version("1")
        full = must_parse_version("1.0.0")

        assert short.equal(full)
        assert short != full

    def test_build_metadata_ignored(self) -> None:
        """Build metadata не влияет на порядок"""
        a = must_parse_version("1.0.0+build.1")
        b = must_parse_version("1.0.0+build.2")

        assert a.equal(b)
        assert not a.less(b)
        assert not b.less(a)

    def test_pre_release_compared_as_plain_string(self) -> None:
        """Pre-release сравнивается посимвольно, а не по идентификаторам"""
        assert must_parse_version("1.0.0-alpha.10").less(must_parse_version("1.0.0-alpha.2"))

    def test_derived_relations(self) -> None:
        low = new_version(1, 0, 0)
        high = new_version(2, 0, 0)

        assert high.greater(low)
        assert not low.greater(high)
        assert high.greater_equal(low)
        assert low.greater_equal(low)
        assert low.less_equal(high)
        assert low.less_equal(low)
        assert not high.less_equal(low)

    def test_exactly_one_relation_holds(self) -> None:
        """Для любой пары выполняется ровно одно из less / equal / greater"""
        texts = ["1", "1.0.0", "1.0.0-alpha", "1.0.0-beta", "1.2", "1.2.3", "2.0.0+meta", "0.9.9"]
        versions = [must_parse_version(t) for t in texts]

        for a, b in itertools.product(versions, repeat=2):
            relations = [a.less(b), a.equal(b), a.greater(b)]
            assert relations.count(True) == 1, (str(a), str(b))

    def test_rich_comparison_operators(self) -> None:
        """<, <=, >, >= делегируют семантическим методам"""
        texts = ["2.0.0", "1.0.0-rc.1", "1.0.0", "0.1"]
        ordered = sorted(must_parse_version(t) for t in texts)

        assert [v.lenient_string() for v in ordered] == ["0.1", "1.0.0-rc.1", "1.0.0", "2.0.0"]
        assert new_version(1, 0, 0) <= must_parse_version("1")
        assert new_version(2, 0, 0) > new_version(1, 9, 9)
        assert new_version(2, 0, 0) >= new_version(2, 0, 0)


# =============================================================================
# ИНКРЕМЕНТЫ
# =============================================================================


class TestIncrement:
    """Тесты для increment* семейства"""

    @pytest.mark.parametrize(
        "text, expected_strict, expected_lenient",
        [
            ("1", "2.0.0", "2"),
            ("1.2", "1.3.0", "1.3"),
            ("2.1-alpha", "2.2.0", "2.2"),
            ("3.4.5", "3.4.6", "3.4.6"),
        ],
    )
    def test_increment(self, text: str, expected_strict: str, expected_lenient: str) -> None:
        """Увеличивается самый правый указанный компонент, без достраивания"""
        v = must_parse_version(text).increment()

        assert v.strict_string() == expected_strict
        assert v.lenient_string() == expected_lenient

    def test_increment_major(self) -> None:
        v = must_parse_version("1.2.3-rc+b").increment_major()

        assert (v.major, v.minor, v.patch) == (2, 0, 0)
        assert v.has_minor and v.has_patch
        assert v.lenient_string() == "2.0.0"

    @pytest.mark.parametrize(
        "text, expected",
        [("1", "1.1.0"), ("1.2", "1.3.0"), ("2.1-alpha", "2.2.0"), ("3.4.5", "3.5.0")],
    )
    def test_increment_minor(self, text: str, expected: str) -> None:
        v = must_parse_version(text).increment_minor()

        assert v.strict_string() == expected
        assert v.lenient_string() == expected

    @pytest.mark.parametrize(
        "text, expected",
        [("1", "1.0.1"), ("1.2", "1.2.1"), ("2.1-alpha", "2.1.1"), ("3.4.5", "3.4.6")],
    )
    def test_increment_patch(self, text: str, expected: str) -> None:
        v = must_parse_version(text).increment_patch()

        assert v.strict_string() == expected
        assert v.lenient_string() == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1", "2.0.0"),
            ("2.1", "3.0.0"),
            ("2.1.5", "2.2.0"),
            ("1.2.3-alpha.1", "1.3.0"),
            ("4.0.2-alpha.1", "4.1.0"),
            ("2.2.1-beta.2+20230101", "2.3.0"),
        ],
    )
    def test_increment_pessimistic(self, text: str, expected: str) -> None:
        assert must_parse_version(text).increment_pessimistic().strict_string() == expected

    def test_increment_pessimistic_keeps_presence(self) -> None:
        """2.1 → 3.0: minor остаётся указанным, patch не появляется"""
        v = must_parse_version("2.1").increment_pessimistic()

        assert v.lenient_string() == "3.0"
        assert v.has_minor
        assert not v.has_patch

    def test_increment_clears_labels(self) -> None:
        v = must_parse_version("1.2.3-rc.1+build.7")

        for bumped in (
            v.increment(),
            v.increment_major(),
            v.increment_minor(),
            v.increment_patch(),
            v.increment_pessimistic(),
        ):
            assert bumped.pre_release == ""
            assert bumped.build_metadata == ""

    def test_increment_overflow_raises(self) -> None:
        """Переполнение unsigned 64-bit не заворачивается в 0"""
        with pytest.raises(ValidationError):
            new_version(UINT64_MAX, 0, 0).increment_major()

        with pytest.raises(ValidationError):
            new_version(1, 2, UINT64_MAX).increment()
