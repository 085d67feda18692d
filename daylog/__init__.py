"""DayLog analytics core: sleep and todo derivation engines.

Public API re-exports for convenient imports:
    from daylog import extract_sleep_records, parse_todos, calculate_total_weighted_rate, ...
"""

# Time utilities
from daylog.dayclock import (
    DAY_CUTOFF_HOUR,
    logical_date,
    logical_day_str,
    logical_start_of_day,
    folded_minutes,
    clock_minutes,
    minutes_to_clock,
    round_half_up,
)

# Tags
from daylog.tags import extract_tags, determine_category

# Sleep
from daylog.sleep import (
    extract_sleep_records,
    get_recent_records,
    get_average_duration,
    get_average_sleep_time,
    get_average_wake_time,
    summarize_recent_sleep,
    records_in_week,
    compute_sleep_score,
    compute_weekly_streak,
)

# Todos
from daylog.todos import (
    is_highlighted,
    parse_indent,
    parse_todos,
    build_task_tree,
    calculate_weighted_completion,
    calculate_total_weighted_rate,
    toggle_todo_line,
    continue_checklist_prefix,
    indent_todo_line,
    outdent_todo_line,
    search_todos,
    group_by_quadrant,
    count_completed,
)

# Levels
from daylog.levels import get_level_info, get_real_level, get_encouragement_message

# Workspace & config
from daylog.workspace import (
    workspace_root,
    profile_path,
    entries_path,
    load_profile,
    load_entries,
    get_user_timezone,
    today_logical,
    today_str,
)

# Models
from daylog.models import (
    LogEntry,
    SleepRecord,
    SleepScore,
    SleepScoreDetails,
    SleepSummary,
    WeeklyStreak,
    TodoItem,
    TodoNode,
    LevelInfo,
    RealLevelInfo,
    TimeWindow,
    Profile,
)
