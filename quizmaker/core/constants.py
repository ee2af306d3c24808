QUIZ_NAME_MIN_LENGTH = 3
QUIZ_NAME_MAX_LENGTH = 200

# max number of new questions accepted in a single create/update request
QUIZ_QUESTIONS_MAX_LENGTH = 200

QUESTION_TEXT_MAX_LENGTH = 1000
CORRECT_ANSWER_MAX_LENGTH = 1000

DEFAULT_PAGE = 1
