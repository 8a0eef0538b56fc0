"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Space Quiz"
QUIZ_TITLE: str = "SPACE QUIZ"
QUIZ_SUBTITLE: str = "Perguntas de Outro Mundo!"
PROGRESS_TEMPLATE: str = "Pergunta {current} de {total}"

RESULT_INTRO: str = "Você acertou"
RESULT_PERCENTAGE_TEMPLATE: str = "{score}%"
RESULT_PERFECT_MESSAGE: str = "Parabéns! Você acertou todas as perguntas!"
RESULT_REVIEW_TITLE: str = "Revisão"
RETRY_BUTTON: str = "Reiniciar"

LOAD_BUTTON: str = "Load Questions"
SETTINGS_BUTTON: str = "Settings"
ABOUT_BUTTON: str = "About"

LOAD_DIALOG_TITLE: str = "Select question file"
LOAD_FILE_FILTER: str = "Question files (*.json *.txt);;All files (*.*)"
NO_QUESTIONS_MESSAGE: str = "The question bank is empty. Load a question file to play."
