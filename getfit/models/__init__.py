from getfit.db.base import Base

# Импорты моделей, чтобы Alembic их видел
from getfit.models.tracker_setting import TrackerSetting  # noqa
from getfit.models.workout_log import WorkoutCompletion, WorkoutStatusEntry  # noqa
from getfit.models.weight_entry import WeightEntry  # noqa
from getfit.models.daily_note import DailyNote  # noqa
from getfit.models.progress_photo import ProgressPhoto  # noqa
