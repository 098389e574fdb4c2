"""HabitLink core library — scheduling, prerequisite and statistics engines.

Public API re-exports for convenient imports:
    from habitcore import is_due, would_create_cycle, completion_rate, ...
"""

# Workspace & paths
from habitcore.workspace import (
    workspace_root,
    get_user_timezone,
    now_local,
    local_today,
    today_str,
    profile_path,
    habits_path,
    habits_json_path,
)

# File I/O
from habitcore.fileio import (
    read_text,
    read_json,
    read_yaml,
)

# Date keys
from habitcore.dates import (
    normalize,
    to_date,
    weekday_index,
    recent_days,
)

# Engines
from habitcore.schedule import is_due
from habitcore.prerequisites import (
    is_prerequisites_met,
    unmet_prerequisites,
)
from habitcore.graph import (
    build_dependency_graph,
    find_cycle,
    would_create_cycle,
)
from habitcore.stats import (
    completion_rate,
    weekly_series,
    current_streak,
    consistency_label,
    compare_habits,
)

# Habits
from habitcore.habits import (
    validate_habit,
    validate_prerequisites,
    find_habit,
    filter_habits,
    day_status,
    load_habits,
)

# Models
from habitcore.models import (
    FrequencyRule,
    Habit,
    HabitsFile,
    CompletionStats,
    DayStatus,
    ComparisonRow,
)
