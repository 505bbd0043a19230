"""Default Korean vocabulary for generated nicknames.

닉네임 생성용 형용사/명사 사전.
초성 필터가 ㅅ, ㅈ 초성을 가진 음절을 모두 걸러내므로 (좆 → ㅈ, 10새 → ㅅ)
해당 초성이 들어간 단어는 넣지 않습니다.
"""

from __future__ import annotations

# =============================================================================
# 형용사
# =============================================================================

# 성격/기분
MOOD_ADJECTIVES = (
    "행복한", "용감한", "느긋한", "명랑한", "엉뚱한", "발랄한", "해맑은",
    "유쾌한", "당당한", "화끈한", "온화한", "너그러운", "반가운", "고마운",
    "뿌듯한", "기특한", "놀란", "배고픈", "배부른",
)

# 생김새/색깔
LOOK_ADJECTIVES = (
    "귀여운", "따뜻한", "포근한", "튼튼한", "커다란", "통통한", "말랑한",
    "깜찍한", "노란", "파란", "하얀", "까만", "푸른", "밝은", "몽글몽글한",
)

# 행동/능력
ACTION_ADJECTIVES = (
    "꼼꼼한", "똑똑한", "영리한", "명쾌한", "날렵한", "빠른", "느린",
    "힘찬", "우아한", "활발한", "든든한", "단단한", "고요한",
    "노래하는", "춤추는", "꿈꾸는",
)

# =============================================================================
# 명사
# =============================================================================

ANIMAL_NOUNS = (
    "호랑이", "고양이", "토끼", "펭귄", "판다", "여우", "곰돌이", "부엉이",
    "고래", "돌고래", "거북이", "코끼리", "기린", "하마", "너구리", "오리",
    "병아리", "코알라", "라쿤", "늑대", "표범", "캥거루", "미어캣", "거위",
    "올빼미", "까치", "비둘기", "펠리컨", "라마", "알파카", "꽃게", "문어",
    "고등어", "해파리",
)

FOOD_NOUNS = (
    "도토리", "바나나", "감귤", "호박", "토마토", "딸기", "포도", "레몬",
    "키위", "마카롱", "붕어빵", "호빵", "만두", "떡볶이",
)

NATURE_NOUNS = (
    "구름", "별똥별", "햇님", "달님", "나무",
)

CHARACTER_NOUNS = (
    "유니콘", "드래곤", "로봇", "탐험가", "토론왕", "논객", "발명가", "여행가",
)

ADJECTIVES: tuple[str, ...] = MOOD_ADJECTIVES + LOOK_ADJECTIVES + ACTION_ADJECTIVES
NOUNS: tuple[str, ...] = ANIMAL_NOUNS + FOOD_NOUNS + NATURE_NOUNS + CHARACTER_NOUNS
