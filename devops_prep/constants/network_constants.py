"""Network configuration constants for the backend API."""

DEFAULT_API_BASE_URL: str = "http://localhost:8082"
REQUEST_TIMEOUT_SECONDS: float = 10.0

API_BASE_URL_ENV_VAR: str = "DEVOPS_PREP_API_URL"
REQUEST_TIMEOUT_ENV_VAR: str = "DEVOPS_PREP_TIMEOUT"
LOG_LEVEL_ENV_VAR: str = "DEVOPS_PREP_LOG_LEVEL"

CATEGORIES_PATH: str = "/api/categories"
RANDOM_QUESTIONS_PATH: str = "/api/questions/random/{count}"
CATEGORY_QUESTIONS_PATH: str = "/api/questions/category/{category}"
QUESTIONS_PATH: str = "/api/questions"
SUBMIT_PATH: str = "/api/submit"
UI_CONFIG_PATH: str = "/api/ui-config"
INTERVIEW_SCENARIOS_PATH: str = "/api/interview-scenarios"
HOMEPAGE_DATA_PATH: str = "/api/homepage-data"
JOB_APPLICATIONS_PATH: str = "/api/job-applications"
JOB_APPLICATION_PATH: str = "/api/job-applications/{application_id}"
