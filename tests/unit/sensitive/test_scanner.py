"""
Scanner 단위 테스트

테스트 케이스:
1. 최단 매치 우선 / 겹치지 않는 매치
2. 화이트리스트 예외 후 더 긴 구문 계속 탐색
3. 유니코드 코드 포인트 단위 처리
4. 대소문자 무시 비교
"""

import pytest

from wordfilter.modules.core.sensitive import (
    Match,
    Scanner,
    WordDictionary,
    WordType,
    render,
)


def _dictionary(
    black: list[str],
    prefix: list[str] | None = None,
    suffix: list[str] | None = None,
) -> WordDictionary:
    dictionary = WordDictionary().with_words(WordType.BLACK, black)
    if prefix:
        dictionary = dictionary.with_words(WordType.WHITE_PREFIX, prefix)
    if suffix:
        dictionary = dictionary.with_words(WordType.WHITE_SUFFIX, suffix)
    return dictionary


class TestScannerBasics:
    """기본 탐지"""

    @pytest.fixture
    def scanner(self) -> Scanner:
        return Scanner(_dictionary(["bad", "worse"]))

    def test_mask(self, scanner: Scanner) -> None:
        assert scanner.mask("bad or worse") == "*** or *****"

    def test_mask_custom_repl(self, scanner: Scanner) -> None:
        assert scanner.mask("so bad", "#") == "so ###"

    def test_strip(self, scanner: Scanner) -> None:
        assert scanner.strip("bad or worse") == " or "

    def test_validate(self, scanner: Scanner) -> None:
        assert tuple(scanner.validate("not good, worse and bad")) == (False, "worse")
        assert tuple(scanner.validate("fine")) == (True, "")

    def test_find_matches_positions(self, scanner: Scanner) -> None:
        assert scanner.find_matches("a bad") == [Match(start=2, end=4, phrase="bad")]

    def test_find_all_dedupes_in_first_seen_order(self) -> None:
        scanner = Scanner(_dictionary(["foo", "bar"]))
        assert scanner.find_all("bar foo bar") == ["bar", "foo"]

    def test_no_match_returns_text_unchanged(self, scanner: Scanner) -> None:
        assert scanner.mask("all good") == "all good"
        assert scanner.strip("all good") == "all good"
        assert scanner.find_all("all good") == []

    def test_empty_text(self, scanner: Scanner) -> None:
        assert scanner.mask("") == ""
        assert scanner.strip("") == ""
        assert tuple(scanner.validate("")) == (True, "")
        assert scanner.find_all("") == []

    def test_empty_dictionary(self) -> None:
        scanner = Scanner(WordDictionary())
        assert scanner.mask("bad") == "bad"
        assert scanner.find_all("bad") == []


class TestMatchSelection:
    """매치 선택 규칙"""

    def test_shortest_phrase_wins(self) -> None:
        scanner = Scanner(_dictionary(["ab", "abc"]))
        assert scanner.find_matches("abc") == [Match(0, 1, "ab")]
        assert scanner.mask("abc") == "**c"

    def test_matches_do_not_overlap(self) -> None:
        scanner = Scanner(_dictionary(["abc", "bcd"]))
        assert scanner.find_all("abcd") == ["abc"]

    def test_restart_by_one(self) -> None:
        scanner = Scanner(_dictionary(["aab"]))
        assert scanner.mask("aaab") == "a***"

    def test_end_of_text_retries_later_start(self) -> None:
        """텍스트 끝에서 끊긴 경로 뒤의 짧은 구문도 탐지"""
        scanner = Scanner(_dictionary(["abc", "b"]))
        assert scanner.find_all("ab") == ["b"]

    def test_vetoed_candidate_continues_to_longer_phrase(self) -> None:
        """예외 처리된 후보 뒤로 같은 시작점의 더 긴 구문을 계속 탐색"""
        dictionary = _dictionary(["ab", "abcd"], suffix=["abc"])

        assert Scanner(dictionary, check_whitelist=True).find_all("abcd") == ["abcd"]
        assert Scanner(dictionary, check_whitelist=False).find_all("abcd") == ["ab"]


class TestWhitelistIntegration:
    """화이트리스트 연동"""

    @pytest.fixture
    def dictionary(self) -> WordDictionary:
        return _dictionary(["bad"], prefix=["not bad"], suffix=["badge"])

    def test_prefix_exception(self, dictionary: WordDictionary) -> None:
        scanner = Scanner(dictionary, check_whitelist=True)
        assert tuple(scanner.validate("this is not bad at all")) == (True, "")

    def test_suffix_exception(self, dictionary: WordDictionary) -> None:
        scanner = Scanner(dictionary, check_whitelist=True)
        assert scanner.mask("my badge") == "my badge"
        assert scanner.mask("that's bad-ge") == "that's ***-ge"

    def test_whitelist_disabled(self, dictionary: WordDictionary) -> None:
        scanner = Scanner(dictionary)
        assert tuple(scanner.validate("this is not bad at all")) == (False, "bad")
        assert scanner.mask("my badge") == "my ***ge"


class TestUnicode:
    """코드 포인트 단위 처리"""

    def test_cjk_mask_length(self) -> None:
        scanner = Scanner(_dictionary(["敏感"]))
        assert scanner.mask("这是敏感词") == "这是**词"

    def test_emoji_is_single_position(self) -> None:
        scanner = Scanner(_dictionary(["💣"]))
        assert scanner.mask("a💣b") == "a*b"
        assert scanner.find_matches("a💣b") == [Match(1, 1, "💣")]

    def test_korean(self) -> None:
        scanner = Scanner(_dictionary(["바보"]))
        assert scanner.strip("너는 바보야") == "너는 야"


class TestIgnoreCase:
    """대소문자 무시 비교"""

    def test_reports_original_casing(self) -> None:
        scanner = Scanner(_dictionary(["bad"]), ignore_case=True)
        assert scanner.find_all("BAD Bad bad") == ["BAD", "Bad", "bad"]
        assert scanner.mask("BAD Bad") == "*** ***"

    def test_case_sensitive_by_default(self) -> None:
        scanner = Scanner(_dictionary(["bad"]))
        assert scanner.find_all("BAD Bad") == []


class TestRender:
    """render() 헬퍼"""

    def test_mask_and_strip(self) -> None:
        matches = [Match(0, 1, "ab"), Match(4, 4, "e")]
        assert render("abcdef", matches, "#") == "##cd#f"
        assert render("abcdef", matches, None) == "cdf"

    def test_no_matches(self) -> None:
        assert render("abc", [], "*") == "abc"
