"""Constants and default amounts (yen).

Note: Keep amounts here to avoid magic numbers spread across the rule engine.
"""

DISASTER_AMOUNT = 6000
DISASTER_MASTER_CODE = "Disaster"

OUTSIDE_DRIVING_AMOUNT = 15000
INSIDE_LONG_DRIVING_AMOUNT = 7500
LOCAL_DRIVING_AMOUNT = 5100

# Flat E/F rate, also the F accommodation add-on and the holiday component
# removed from E driving amounts on work days.
HOLIDAY_COMPONENT_AMOUNT = 2400

HOLIDAY_FULL_DAY_AMOUNT = 2400
HOLIDAY_HALF_DAY_AMOUNT = 1700
DESIGNATED_COMPETITION_AMOUNT = 3400
NON_DESIGNATED_COMPETITION_AMOUNT = 2400
TRAINING_TRIP_AMOUNT = 3400
LEGACY_OTHER_AMOUNT = 6000

DEFAULT_DESTINATION_ID = "inside_short"
