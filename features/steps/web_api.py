# features/steps/web_api.py
import application.steps.web_api_steps  # noqa: F401
