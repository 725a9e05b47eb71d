"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "DevOps Interview Prep"

MODE_BUTTON_HOME: str = "Home"
MODE_BUTTON_QUIZ: str = "Kubernetes Quiz"
MODE_BUTTON_INTERVIEW: str = "Interview Simulation"
MODE_BUTTON_APPLICATIONS: str = "Job Applications"

QUIZ_GENERATE_BUTTON: str = "Generate Questions"
QUIZ_ADD_QUESTION_BUTTON: str = "Add Question"
QUIZ_SUBMIT_BUTTON: str = "Submit Answer"
QUIZ_SHOW_ANSWER_BUTTON: str = "Show Answer"
QUIZ_HIDE_ANSWER_BUTTON: str = "Hide Answer"
QUIZ_PREV_BUTTON: str = "Previous"
QUIZ_NEXT_BUTTON: str = "Next"
QUIZ_FINISH_BUTTON: str = "Finish Quiz"
QUIZ_RESTART_BUTTON: str = "Start New Quiz"
ALL_CATEGORIES_LABEL: str = "All Categories"
PLACEHOLDER_OPEN_ANSWER: str = "Type your answer here..."
NO_QUESTIONS_MESSAGE: str = "No questions were returned for this selection."
LOAD_QUESTIONS_FAILED_MESSAGE: str = "Failed to load questions. Is the backend running?"
SUBMIT_FAILED_MESSAGE: str = "Failed to submit answer. Please try again."

ADD_QUESTION_TITLE: str = "Add New Question"
ADD_QUESTION_SUCCESS_MESSAGE: str = "Question added successfully!"
ADD_QUESTION_FAILED_MESSAGE: str = "Failed to add question."
PLACEHOLDER_QUESTION: str = "Enter the question text (supports Markdown)."

INTERVIEW_START_BUTTON: str = "Start Interview"
INTERVIEW_NEXT_BUTTON: str = "Next Question"
INTERVIEW_FINISH_BUTTON: str = "Finish Interview"
INTERVIEW_RESTART_BUTTON: str = "Start Over"
INTERVIEW_INTRO_TEXT: str = (
    "Experience a realistic DevOps interview with three phases: personal background, "
    "technical knowledge and real-world scenarios. Every question is timed and the "
    "interview moves on automatically when the clock runs out."
)
PLACEHOLDER_INTERVIEW_ANSWER: str = "Type your answer here. Think out loud, as you would in the interview."

APPLICATIONS_ADD_BUTTON: str = "Add Application"
APPLICATIONS_REFRESH_BUTTON: str = "Refresh"
APPLICATIONS_SEARCH_PLACEHOLDER: str = "Search companies or locations..."
APPLICATIONS_EMPTY_MESSAGE: str = "No applications yet. Start tracking by adding your first one!"
APPLICATIONS_NO_MATCH_MESSAGE: str = "No applications match the current search."
APPLICATION_DIALOG_ADD_TITLE: str = "Add Application"
APPLICATION_DIALOG_EDIT_TITLE: str = "Edit Application"
ALL_STATUSES_LABEL: str = "All Status"
DELETE_APPLICATION_PROMPT: str = "Are you sure you want to delete this application?"
