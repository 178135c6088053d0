# votingsystem/config.py
# Central place for ledger constants

# Candidate ids look like "candidate_<sequence>_<random>"
CANDIDATE_ID_PREFIX = "candidate"
CANDIDATE_ID_RANDOM_CHARS = 9

# Decimal places used for result percentages ("50.00")
PERCENTAGE_PLACES = 2
