QUESTIONS = (
    "Do you have flat feet or high arches?",
    "What sport do you play (if any)?",
    "What kind of cushioning or support do you prefer?",
    "What colors and styles do you love?",
    "Are you looking for lightweight speed or maximum durability?",
    "What's your go-to price range?",
    "How do you like your shoes to fit — snug, roomy, or just right?",
    "Are you on your feet all day or just for short bursts?",
    "Want something low-key or something that turns heads?",
)

ANSWER_PLACEHOLDER = "Type your answer..."
NEXT_LABEL = "Next"
SUBMIT_LABEL = "Find My Kicks"


def question_label(question: str) -> str:
    """Question text up to its first question mark."""
    return question.split("?")[0]
