"""한글 음절 이름 생성

U+AC00 ~ U+D7A3 범위의 음절은 UnicodeData.txt에 First/Last 범위로만 나오므로
초성/중성/종성 인덱스를 계산해 로마자 이름을 만든다.
"""

HANGUL_SYLLABLE_FIRST = 0xAC00
HANGUL_SYLLABLE_LAST = 0xD7A3

# ㄱ ㄲ ㄴ ㄷ ㄸ ㄹ ㅁ ㅂ ㅃ ㅅ ㅆ ㅇ ㅈ ㅉ ㅊ ㅋ ㅌ ㅍ ㅎ
INITIALS = (
    "g", "gg", "n", "d", "dd", "r", "m", "b", "bb", "s",
    "ss", "", "j", "jj", "ch", "k", "t", "p", "h",
)
# ㅏ ㅐ ㅑ ㅒ ㅓ ㅔ ㅕ ㅖ ㅗ ㅘ ㅙ ㅚ ㅛ ㅜ ㅝ ㅞ ㅟ ㅠ ㅡ ㅢ ㅣ
VOWELS = (
    "a", "ae", "ya", "yae", "eo", "e", "yeo", "ye", "o", "wa", "wae",
    "oe", "yo", "u", "weo", "we", "wi", "yu", "eu", "ui", "i",
)
# (없음) ㄱ ㄲ ㄳ ㄴ ㄵ ㄶ ㄷ ㄹ ㄺ ㄻ ㄼ ㄽ ㄾ ㄿ ㅀ ㅁ ㅂ ㅄ ㅅ ㅆ ㅇ ㅈ ㅊ ㅋ ㅌ ㅍ ㅎ
FINALS = (
    "", "g", "gg", "gs", "n", "nj", "nh", "d", "l", "lg", "lm", "lb", "ls", "lt",
    "lp", "lh", "m", "b", "bs", "s", "ss", "ng", "j", "ch", "k", "t", "p", "h",
)

# 21 * 28
_SYLLABLES_PER_INITIAL = len(VOWELS) * len(FINALS)


def is_hangul_syllable(code_point: int) -> bool:
    return HANGUL_SYLLABLE_FIRST <= code_point <= HANGUL_SYLLABLE_LAST


def hangul_syllable_name(code_point: int) -> str:
    """음절의 로마자 표기 (0xAC00 -> "ga", 0xD7A3 -> "hih")"""
    if not is_hangul_syllable(code_point):
        raise ValueError(f"한글 음절이 아님: U+{code_point:04X}")

    order = code_point - HANGUL_SYLLABLE_FIRST
    initial = INITIALS[order // _SYLLABLES_PER_INITIAL]
    vowel = VOWELS[(order % _SYLLABLES_PER_INITIAL) // len(FINALS)]
    final = FINALS[order % len(FINALS)]
    return f"{initial}{vowel}{final}"
