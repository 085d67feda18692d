"""Tests for daylog/levels.py."""

from daylog.levels import get_encouragement_message, get_level_info, get_real_level


def test_daily_level_boundaries():
    expected = {0: 1, 24: 1, 25: 2, 49: 2, 50: 3, 74: 3, 75: 4, 99: 4, 100: 5}
    for pct, level in expected.items():
        assert get_level_info(pct).level == level, pct


def test_daily_level_titles():
    assert get_level_info(100).title == "사자왕 👑"
    assert get_level_info(0).title == "아기 사자 🐱"


def test_real_level_thresholds_are_inclusive():
    thresholds = [0, 25, 70, 130, 210, 330, 500, 750, 1100, 1700]
    for level, at in enumerate(thresholds, start=1):
        assert get_real_level(at).level == level
        if at > 0:
            assert get_real_level(at - 1).level == level - 1


def test_real_level_next_level_at():
    assert get_real_level(0).next_level_at == 25
    assert get_real_level(24).next_level_at == 25
    assert get_real_level(25).next_level_at == 70
    assert get_real_level(1699).next_level_at == 1700
    top = get_real_level(5000)
    assert top.level == 10
    assert top.next_level_at == 9999
    assert top.title == "전설의 사자왕 🏆"


def test_encouragement_message():
    assert get_encouragement_message(100) == "완벽한 하루! 오늘 정말 잘했어 🎉"
    assert get_encouragement_message(80) == "거의 다 왔어! 조금만 더!"
    assert get_encouragement_message(50) == "절반 넘었어! 잘하고 있어"
    assert get_encouragement_message(25) == "순조롭게 진행 중!"
    assert get_encouragement_message(1) == "좋은 시작이야! 계속 가보자"
    assert get_encouragement_message(0) == "오늘도 화이팅! 하나씩 시작해볼까?"
