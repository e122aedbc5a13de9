import unittest

from gpacalc.core.gpa import CourseRow, SemesterRow, compute_cgpa, compute_gpa, number_or_zero, parse_number


class GPATests(unittest.TestCase):
    def test_empty_course_list(self):
        result = compute_gpa([])
        self.assertEqual(result.gpa, 0)
        self.assertEqual(result.total_credit, 0)
        self.assertEqual(result.total_weighted_point, 0)
        self.assertEqual(result.processed, ())

    def test_single_course(self):
        result = compute_gpa([CourseRow("Calculus", 3, 90)])
        course = result.processed[0]
        self.assertEqual(course.grade, "A")
        self.assertEqual(course.point, 4)
        self.assertEqual(course.weighted_point, 12)
        self.assertEqual(course.index, 1)
        self.assertAlmostEqual(result.gpa, 4.00)

    def test_sgpa(self):
        result = compute_gpa([CourseRow("Calculus", 3, 90), CourseRow("History", 2, 50)])
        self.assertEqual(result.total_credit, 5)
        self.assertAlmostEqual(result.gpa, 2.40, places=2)
        self.assertEqual([c.index for c in result.processed], [1, 2])

    def test_text_input_is_parsed_leniently(self):
        result = compute_gpa([CourseRow("Physics", "4", "72.5"), CourseRow("Art", "", "abc")])
        self.assertEqual(result.total_credit, 4)
        self.assertEqual(result.processed[0].grade, "B")
        self.assertEqual(result.processed[1].marks, 0)
        self.assertEqual(result.processed[1].grade, "F")

    def test_zero_credits_gives_zero_gpa(self):
        result = compute_gpa([CourseRow("Seminar", 0, 95)])
        self.assertEqual(result.gpa, 0)

    def test_gpa_stays_within_point_range(self):
        result = compute_gpa([CourseRow("A", 3, 88), CourseRow("B", 4, 61), CourseRow("C", 1, 76)])
        points = [c.point for c in result.processed]
        self.assertGreaterEqual(result.gpa, min(points))
        self.assertLessEqual(result.gpa, max(points))

    def test_cgpa(self):
        result = compute_cgpa([SemesterRow(3.5, 15), SemesterRow("3.0", "12")])
        self.assertAlmostEqual(result.cgpa, 3.2778, places=4)
        self.assertEqual(f"{result.cgpa:.2f}", "3.28")
        self.assertEqual(result.total_credits, 27)
        self.assertEqual(result.semester_count, 2)

    def test_cgpa_without_credits(self):
        result = compute_cgpa([SemesterRow("3.9", "")])
        self.assertEqual(result.cgpa, 0)
        self.assertEqual(result.semester_count, 1)

    def test_parse_number(self):
        self.assertEqual(parse_number(" 12 "), 12.0)
        self.assertEqual(parse_number(-3), -3.0)
        self.assertIsNone(parse_number(""))
        self.assertIsNone(parse_number("nan"))
        self.assertIsNone(parse_number(True))
        self.assertEqual(number_or_zero("twelve"), 0.0)


if __name__ == "__main__":
    unittest.main()
