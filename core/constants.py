"""
Constants and configuration values for the transcription workflow.
"""

# Score assigned to blocks that never see a non-empty line
DEFAULT_VERTICAL_SCORE = 0

# Number of corner points on a geometried element (TL, TR, BR, BL)
CORNER_POINT_COUNT = 4

# Transcript layout
LINE_SEPARATOR = '\n'
ELEMENT_TERMINATOR = ' '

# Ranking strategies
RANKING_UNIQUE_SCORE = 'unique_score'
RANKING_STABLE = 'stable'
RANKING_STRATEGIES = (RANKING_UNIQUE_SCORE, RANKING_STABLE)

# Presenter notifications
PRESENTER_MESSAGES = {
    'no_text': 'No text found',
    'capture_failed': 'Picture not taken!',
    'recognition_failed': 'Text recognition failed',
}

# Outcome statuses reported by the transcription service
OUTCOME_TEXT = 'text'
OUTCOME_NO_TEXT = 'no_text'
OUTCOME_FAILED = 'failed'

# Detection payload coordinate spaces
COORDINATE_SPACE_PIXEL = 'pixel'
COORDINATE_SPACE_NORMALIZED = 'normalized'

# Upper bound of the normalized coordinate space (0-999)
NORMALIZED_MAX = 999.0
