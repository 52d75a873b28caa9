from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
# date part only; the weekday comes from SHORT_WEEKDAYS since %a follows LC_TIME
USE_BY_FORMAT: Final[str] = "%d/%m/%Y"
SHORT_WEEKDAYS: Final[tuple] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

DEFAULT_STORAGE_INSTRUCTIONS: Final[str] = (
    "Store in a refrigerator below 5°c. Heat in a microwave for 3–4 minutes or until piping hot."
)
DEFAULT_HEATING_INSTRUCTIONS: Final[str] = "Pierce film and heat for 3-4 minutes or until piping hot."

DEFAULT_LABEL_QUANTITY: Final[int] = 10
USE_BY_DAYS: Final[int] = 5
