ANSWER_LETTERS = ["A", "B", "C", "D"]

STATUS_UNANSWERED = "unanswered"
STATUS_CORRECT = "correct"
STATUS_WRONG = "wrong"


def is_correct(mcq, selected):
    """Checks a selected option against the correct answer.

    The model sometimes returns the answer text and sometimes only its letter,
    so both encodings are accepted.
    """
    if selected is None:
        return False
    correct = mcq.correct_answer or ""
    if selected == correct:
        return True
    letter = correct.strip().upper()
    if letter in ANSWER_LETTERS:
        index = ANSWER_LETTERS.index(letter)
        return index < len(mcq.options) and mcq.options[index] == selected
    return False


def question_status(mcq, answers, index):
    if index not in answers:
        return STATUS_UNANSWERED
    return STATUS_CORRECT if is_correct(mcq, answers[index]) else STATUS_WRONG


def score(mcqs, answers):
    """Tallies answers (question index -> selected option)."""
    correct = sum(1 for i, mcq in enumerate(mcqs) if i in answers and is_correct(mcq, answers[i]))
    return {"correct": correct, "total": len(mcqs), "answered": len(answers)}


def record_answer(answers, revealed, index, option):
    """Stores the first answer for a question and reveals its explanation.

    Returns False when the question was already answered; answers are final.
    """
    if revealed.get(index):
        return False
    answers[index] = option
    revealed[index] = True
    return True
