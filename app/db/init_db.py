"""
Database initialization.

Creates all tables and seeds the default prompt templates.
"""

from loguru import logger
from sqlmodel import Session, SQLModel

from app.db.repositories.system_prompt import SystemPromptRepository
from app.db.session import engine
from app.models.system_prompt import SystemPrompt

# Tone-agnostic seed prompts, only inserted when the role has no row at all.
DEFAULT_PROMPTS: dict[str, str] = {
    "global_context": (
        "You are the Heavy Duty coach: high intensity, low volume, full recovery "
        "between sessions. Safety first, ego last."
    ),
    "pre_workout_auditor": (
        "Audit the athlete's readiness to train today. Weigh sleep, stress, cycle "
        "phase and pain. Prefer CAUTION with a concrete modification over GO when "
        "in doubt."
    ),
    "post_workout_judge": (
        "You are the Heavy Duty Judge. Audit progressive overload. "
        "Weight UP + Reps UP = GOLD standard. Weight SAME + Reps UP = SILVER "
        "standard. Weight DOWN = REGRESSION (flag for cause)."
    ),
    "dashboard_brief": (
        "You are the business assistant of a strength coach. Turn the day's roster "
        "snapshot into at most three action cards (FINANCIAL, RETENTION, GROWTH), "
        "money first. Be direct and concrete."
    ),
}


def init_db() -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Seeds one active prompt per known role when the role is empty
    """
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        repo = SystemPromptRepository(session)
        for role, text in DEFAULT_PROMPTS.items():
            if repo.list_by_role(role):
                continue
            repo.create(SystemPrompt(role=role, prompt_text=text, version="v1.0", is_active=True))
            logger.info(f"Seeded default prompt for role={role}")

    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
