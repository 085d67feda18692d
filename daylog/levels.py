"""Todo gamification: daily level, lifetime level, and encouragement."""

from __future__ import annotations

from daylog.models import LevelInfo, RealLevelInfo

# (min percentage, level, title); titles stay in the app's label locale.
DAILY_LEVELS = [
    (100, 5, "사자왕 👑"),
    (75, 4, "용감한 사자 ⚡"),
    (50, 3, "씩씩한 사자 💪"),
    (25, 2, "꼬마 사자 🦁"),
    (0, 1, "아기 사자 🐱"),
]

# (min completed todos, level, title)
LIFETIME_LEVELS = [
    (1700, 10, "전설의 사자왕 🏆"),
    (1100, 9, "위대한 사자 ✨"),
    (750, 8, "현명한 사자 📚"),
    (500, 7, "강인한 사자 🔥"),
    (330, 6, "늠름한 사자 🌟"),
    (210, 5, "사자왕 👑"),
    (130, 4, "용감한 사자 ⚡"),
    (70, 3, "씩씩한 사자 💪"),
    (25, 2, "꼬마 사자 🦁"),
    (0, 1, "아기 사자 🐱"),
]
MAX_LEVEL_NEXT = 9999

ENCOURAGEMENTS = [
    (100, "완벽한 하루! 오늘 정말 잘했어 🎉"),
    (75, "거의 다 왔어! 조금만 더!"),
    (50, "절반 넘었어! 잘하고 있어"),
    (25, "순조롭게 진행 중!"),
]


def get_level_info(percentage: float) -> LevelInfo:
    """Map today's completion percentage to one of five levels."""
    for floor, level, title in DAILY_LEVELS:
        if percentage >= floor:
            return LevelInfo(level=level, title=title)
    return LevelInfo(level=1, title=DAILY_LEVELS[-1][2])


def get_real_level(total_completed: int) -> RealLevelInfo:
    """Map the lifetime count of completed todos to one of ten levels.

    next_level_at is the count needed for the following level.
    """
    next_at = MAX_LEVEL_NEXT
    for floor, level, title in LIFETIME_LEVELS:
        if total_completed >= floor:
            return RealLevelInfo(level=level, title=title, next_level_at=next_at)
        next_at = floor
    return RealLevelInfo(level=1, title=LIFETIME_LEVELS[-1][2], next_level_at=LIFETIME_LEVELS[-2][0])


def get_encouragement_message(percentage: float) -> str:
    for floor, message in ENCOURAGEMENTS:
        if percentage >= floor:
            return message
    if percentage > 0:
        return "좋은 시작이야! 계속 가보자"
    return "오늘도 화이팅! 하나씩 시작해볼까?"
