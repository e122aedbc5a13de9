import unittest

from gpacalc.core.gpa import CourseRow, SemesterRow
from gpacalc.core.validation import (
    RowValidationError,
    apply_edit,
    ensure_valid_semesters,
    validate_courses,
    validate_semesters,
    validate_stored_semesters,
)


class ApplyEditTests(unittest.TestCase):
    def test_negative_credit_is_rejected(self):
        row = CourseRow("Chemistry", "3", "70")
        self.assertEqual(apply_edit(row, "credit", -1).credit, "3")
        self.assertEqual(apply_edit(row, "credit", "-2").credit, "3")

    def test_zero_is_accepted(self):
        row = CourseRow("Chemistry", "3", "70")
        self.assertEqual(apply_edit(row, "credit", 0).credit, 0)

    def test_unparsable_text_is_permitted(self):
        row = CourseRow("Chemistry", "3", "70")
        self.assertEqual(apply_edit(row, "marks", "").marks, "")
        self.assertEqual(apply_edit(row, "marks", "e").marks, "e")

    def test_title_accepts_any_text(self):
        row = CourseRow()
        self.assertEqual(apply_edit(row, "title", "-1").title, "-1")

    def test_edit_returns_new_row(self):
        row = CourseRow("Biology", "2", "55")
        updated = apply_edit(row, "marks", "60")
        self.assertEqual(row.marks, "55")
        self.assertEqual(updated.marks, "60")

    def test_negative_semester_gpa_is_rejected(self):
        row = SemesterRow("3.2", "15")
        self.assertEqual(apply_edit(row, "gpa", "-0.5").gpa, "3.2")
        self.assertEqual(apply_edit(row, "gpa", "3.75").gpa, "3.75")

    def test_semester_credit_blocks_decimal_point_and_minus(self):
        row = SemesterRow("3.2", "15")
        self.assertEqual(apply_edit(row, "credit", "15.").credit, "15")
        self.assertEqual(apply_edit(row, "credit", "-15").credit, "15")
        self.assertEqual(apply_edit(row, "credit", "18").credit, "18")

    def test_semester_credit_rejects_fractional_numbers(self):
        row = SemesterRow("3.2", 15)
        self.assertEqual(apply_edit(row, "credit", 7.5).credit, 15)
        self.assertEqual(apply_edit(row, "credit", 18.0).credit, 18.0)
        self.assertEqual(apply_edit(row, "credit", -2).credit, 15)

    def test_unknown_field(self):
        with self.assertRaises(ValueError):
            apply_edit(SemesterRow(), "title", "x")


class SubmissionTests(unittest.TestCase):
    def test_courses_require_title_and_numbers(self):
        problems = validate_courses([CourseRow("", "3", "80"), CourseRow("Art", "", "x")])
        self.assertEqual(
            problems,
            [
                "Course 1: title is required.",
                "Course 2: credit is required.",
                "Course 2: marks must be a number.",
            ],
        )

    def test_valid_courses(self):
        self.assertEqual(validate_courses([CourseRow("Art", "3", "80")]), [])

    def test_empty_lists(self):
        self.assertEqual(validate_courses([]), ["Add at least one course."])
        self.assertEqual(validate_semesters([]), ["Add at least one semester."])

    def test_semester_credit_must_be_whole_and_positive(self):
        problems = validate_semesters([SemesterRow("3.0", "0"), SemesterRow("3.0", 7.5), SemesterRow("3.0", 15)])
        self.assertEqual(len(problems), 2)
        self.assertTrue(problems[0].startswith("Sem 1"))
        self.assertTrue(problems[1].startswith("Sem 2"))

    def test_semester_gpa_range(self):
        problems = validate_semesters([SemesterRow("4.5", "12")])
        self.assertEqual(problems, ["Sem 1: GPA must be between 0 and 4."])

    def test_stored_semesters_follow_edit_rules(self):
        self.assertEqual(validate_stored_semesters([SemesterRow("3.00", 12), SemesterRow("", "")]), [])
        problems = validate_stored_semesters([SemesterRow(-3, -5), SemesterRow("3.1", 7.5)])
        self.assertEqual(
            problems,
            [
                "Sem 1: -3 is not a valid gpa.",
                "Sem 1: -5 is not a valid credit.",
                "Sem 2: 7.5 is not a valid credit.",
            ],
        )

    def test_ensure_raises_with_problems(self):
        with self.assertRaises(RowValidationError) as ctx:
            ensure_valid_semesters([SemesterRow("", "")])
        self.assertEqual(len(ctx.exception.problems), 2)


if __name__ == "__main__":
    unittest.main()
