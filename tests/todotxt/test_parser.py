"""Parser — todo.txt line grammar.

Tests cover:
    - Incomplete tasks with priority and creation date
    - Complete tasks with and without the "x" marker
    - Tokens that only count when followed by whitespace
    - Invalid dates falling back to description text
    - Line splitting, trimming, and blank line handling
"""

from datetime import date

from todotxt.parser import iter_tasks, parse_task, parse_tasks
from todotxt.priority import Priority


# --- Incomplete tasks ---------------------------------------------------------

def test_plain_description_is_incomplete():
    task = parse_task("Post signs around the neighborhood +GarageSale")
    assert not task.is_complete
    assert task.priority is None
    assert task.creation_date is None
    assert task.description == "Post signs around the neighborhood +GarageSale"


def test_priority_is_parsed():
    task = parse_task("(A) Thank Mom for the meatballs @phone")
    assert task.priority == Priority.A
    assert task.description == "Thank Mom for the meatballs @phone"


def test_priority_and_creation_date():
    task = parse_task("(B) 2011-03-01 Call Mom")
    assert task.priority == Priority.B
    assert task.creation_date == date(2011, 3, 1)
    assert task.completion_date is None
    assert task.description == "Call Mom"


def test_creation_date_without_priority():
    task = parse_task("2011-03-01 Call Mom")
    assert not task.is_complete
    assert task.creation_date == date(2011, 3, 1)


def test_lowercase_priority_is_text():
    task = parse_task("(a) Call Mom")
    assert task.priority is None
    assert task.description == "(a) Call Mom"


def test_priority_not_at_start_is_text():
    task = parse_task("Really gotta call Mom (A) @phone")
    assert task.priority is None


def test_priority_must_be_followed_by_whitespace():
    task = parse_task("(A)->Submit TPS report")
    assert task.priority is None
    assert task.description == "(A)->Submit TPS report"


# --- Complete tasks -----------------------------------------------------------

def test_x_marks_complete():
    task = parse_task("x Call Mom")
    assert task.is_complete
    assert task.completion_date is None
    assert task.creation_date is None
    assert task.description == "Call Mom"


def test_x_with_both_dates():
    task = parse_task("x 2011-03-02 2011-03-01 Review Tim's pull request +TodoTxtTouch @github")
    assert task.is_complete
    assert task.completion_date == date(2011, 3, 2)
    assert task.creation_date == date(2011, 3, 1)
    assert task.description.startswith("Review Tim's")


def test_x_with_single_date_keeps_date_in_description():
    task = parse_task("x 2011-03-02 Call Mom")
    assert task.is_complete
    assert task.completion_date is None
    assert task.description == "2011-03-02 Call Mom"


def test_complete_task_has_no_priority():
    task = parse_task("x (A) Call Mom")
    assert task.priority is None
    assert task.description == "(A) Call Mom"


def test_two_leading_dates_without_x_are_complete():
    task = parse_task("2011-03-02 2011-03-01 Call Mom")
    assert task.is_complete
    assert task.completion_date == date(2011, 3, 2)
    assert task.creation_date == date(2011, 3, 1)


def test_priority_with_two_dates_stays_incomplete():
    task = parse_task("(A) 2011-03-02 2011-03-01 Call Mom")
    assert not task.is_complete
    assert task.priority == Priority.A
    assert task.creation_date == date(2011, 3, 2)
    assert task.description == "Call Mom"


def test_x_without_whitespace_is_text():
    task = parse_task("xylophone lesson")
    assert not task.is_complete
    assert task.description == "xylophone lesson"


def test_bare_x_is_text():
    task = parse_task("x")
    assert not task.is_complete
    assert task.description == "x"


# --- Dates --------------------------------------------------------------------

def test_invalid_calendar_date_is_text():
    task = parse_task("2011-02-30 Call Mom")
    assert task.creation_date is None
    assert task.description == "2011-02-30 Call Mom"


def test_malformed_date_is_text():
    task = parse_task("2011-3-1 Call Mom")
    assert task.creation_date is None


# --- Lines --------------------------------------------------------------------

def test_blank_lines_are_skipped():
    tasks = parse_tasks("\n  \n(A) one\n\n\t\ntwo\n")
    assert [t.description for t in tasks] == ["one", "two"]


def test_lines_are_trimmed_and_crlf_tolerated():
    tasks = parse_tasks("   (C) padded   \r\nnext\r\n")
    assert tasks[0].priority == Priority.C
    assert tasks[0].description == "padded"
    assert tasks[1].description == "next"


def test_empty_input_has_no_tasks():
    assert parse_tasks("") == []


def test_iter_tasks_is_lazy():
    iterator = iter_tasks("one\ntwo")
    assert next(iterator).description == "one"


def test_roundtrip_display_form():
    line = "x 2011-03-02 2011-03-01 Review pull request"
    assert str(parse_task(line)) == line
    assert str(parse_task("(A) 2011-03-01 Call Mom")) == "(A) 2011-03-01 Call Mom"
