"""Application constants."""

# Defaults for new rows
DEFAULT_PLAN_NAME = "Workout plan"
DEFAULT_WORKOUT_TITLE = "Workout"
FIRST_PLAN_NAME = "My First Plan"

# Names and titles entered by the user
MAX_NAME_LENGTH = 50

# Add-exercise dialog defaults
DEFAULT_SETS = 3
DEFAULT_REPS = 10
DEFAULT_REST_TIME_SECONDS = 60

# Catalog filter value meaning "no muscle group filter"
ALL_MUSCLE_GROUPS = "All"
