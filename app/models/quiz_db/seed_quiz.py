import logging
from sqlalchemy.orm import Session
from app.core.database import SessionLocal
from app.models.quiz_db.option_db import PersonalityOption
from app.models.quiz_db.question_db import PersonalityQuestion
from app.models.quiz_db.quiz_db import PersonalityQuiz, new_id, utcnow
from app.models.quiz_db.scores import encode_scores
from app.models.quiz_db.type_db import PersonalityType

logger = logging.getLogger(__name__)


# Options score against type codes; codes are swapped for the generated ids on insert.
system_quizzes = [
    {
        "title": "Learning Style",
        "description": "Find out how you take in new information best.",
        "category": "learning",
        "language": "en",
        "types": [
            {"code": "V", "name": "Visual", "description": "You think in pictures, maps and diagrams."},
            {"code": "A", "name": "Auditory", "description": "You learn by listening and talking things through."},
            {"code": "K", "name": "Kinesthetic", "description": "You learn by doing and trying things out."},
        ],
        "questions": [
            {
                "question_text": "Do you prefer diagrams when learning something new?",
                "options": [
                    {"option_text": "Yes, show me a chart", "scores": {"V": 2}},
                    {"option_text": "I'd rather hear it explained", "scores": {"A": 2}},
                    {"option_text": "Let me try it myself", "scores": {"K": 2}},
                ],
            },
            {
                "question_text": "When giving directions, you usually:",
                "options": [
                    {"option_text": "Draw a quick map", "scores": {"V": 2}},
                    {"option_text": "Describe the route out loud", "scores": {"A": 2}},
                    {"option_text": "Walk there with them", "scores": {"K": 2}},
                ],
            },
            {
                "question_text": "What helps you remember a phone number?",
                "options": [
                    {"option_text": "Seeing it written down", "scores": {"V": 2}},
                    {"option_text": "Saying it aloud a few times", "scores": {"A": 2}},
                    {"option_text": "Typing it out", "scores": {"K": 1, "V": 1}},
                ],
            },
        ],
    },
]


def seed_system_quizzes(db: Session) -> int:
    created = 0
    for data in system_quizzes:
        exists = (
            db.query(PersonalityQuiz)
            .filter(PersonalityQuiz.is_system.is_(True), PersonalityQuiz.title == data["title"])
            .first()
        )
        if exists:
            continue

        now = utcnow()
        quiz = PersonalityQuiz(
            id=new_id(),
            user_id=None,
            title=data["title"],
            description=data["description"],
            category=data["category"],
            language=data["language"],
            is_system=True,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        db.add(quiz)

        type_ids = {}
        for t in data["types"]:
            personality_type = PersonalityType(id=new_id(), quiz_id=quiz.id, created_at=now, **t)
            type_ids[t["code"]] = personality_type.id
            db.add(personality_type)

        for q_index, q in enumerate(data["questions"]):
            question = PersonalityQuestion(
                id=new_id(),
                quiz_id=quiz.id,
                order_index=q_index,
                question_text=q["question_text"],
                created_at=now,
            )
            db.add(question)
            for o_index, o in enumerate(q["options"]):
                db.add(PersonalityOption(
                    id=new_id(),
                    question_id=question.id,
                    order_index=o_index,
                    option_text=o["option_text"],
                    type_scores_json=encode_scores({type_ids[code]: s for code, s in o["scores"].items()}),
                    created_at=now,
                ))
        created += 1

    db.commit()
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    db: Session = SessionLocal()
    try:
        count = seed_system_quizzes(db)
    finally:
        db.close()
    logger.info("seeded %d system quizzes", count)
