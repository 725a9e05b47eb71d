"""Static metadata describing DevOps Interview Prep."""

APP_NAME = "DevOps Interview Prep"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "DevOps Interview Prep is a desktop companion for DevOps interview practice. "
    "Drill Kubernetes questions by category, rehearse a timed three-phase mock interview, "
    "and keep track of your job applications."
)

HELP_TEXT = (
    "Quiz: pick a category (or All Categories) and a question count, then press "
    "'Generate Questions'. Choosing a specific category loads every question in it.\n\n"
    "Interview: each question has its own countdown. When time runs out the interview "
    "moves on automatically, so answer before the clock hits zero.\n\n"
    "Applications: add, edit, search and filter your applications. Deleting asks for "
    "confirmation first."
)
