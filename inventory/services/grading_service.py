"""Grading service - reads student results from text and writes a report."""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union

from inventory.models.domain import GRADE_BANDS, Student
from inventory.models.dto import StudentRecord
from inventory.repositories.exceptions import DuplicateKeyError
from inventory.repositories.typed_repository import TypedRepository
from inventory.services.config_service import ConfigService, get_config_service
from inventory.services.exceptions import (
    InvalidScoreFormatError,
    MissingFieldError,
    StudentFileError,
)

FIELD_COUNT = 3
GRADES = tuple(letter for letter, _, _ in GRADE_BANDS) + ("F",)


class GradingService:
    """
    Service for the school grading demo.

    Input files hold one ``ID, Name, Score`` line per student. A bad line
    aborts the whole read with its line number; the repository keeps what
    it held before.
    """

    def __init__(
        self,
        students: Optional[TypedRepository[Student]] = None,
        config_service: Optional[ConfigService] = None,
    ):
        self.students = students if students is not None else TypedRepository(StudentRecord)
        self.config_service = config_service or get_config_service()

    def create_sample_data_file(self, path: Union[str, Path]) -> int:
        """Write the configured sample students to ``path``. Returns rows written."""
        rows = self.config_service.get_seed("students")
        with open(path, 'w', encoding='utf-8') as f:
            for row in rows:
                f.write(f"{row['id']}, {row['fullName']}, {row['score']}\n")
        return len(rows)

    def read_students_from_file(self, path: Union[str, Path]) -> List[Student]:
        """
        Parse a student file into the repository, replacing its contents.

        Blank lines are skipped. Scores outside 0-100 are accepted with a
        warning and graded F.

        Raises:
            FileNotFoundError: ``path`` does not exist
            MissingFieldError: Wrong field count or an empty field
            InvalidScoreFormatError: ID or score is not an integer
            StudentFileError: Student ID repeated in the file
        """
        parsed: TypedRepository[Student] = TypedRepository(StudentRecord)

        with open(path, 'r', encoding='utf-8') as f:
            for line_number, raw_line in enumerate(f, start=1):
                line = raw_line.rstrip("\r\n")
                if not line.strip():
                    continue

                student = self._parse_line(line_number, line)
                try:
                    parsed.add(student)
                except DuplicateKeyError as e:
                    raise StudentFileError(line_number, str(e)) from e

        self.students = parsed
        return parsed.get_all()

    @staticmethod
    def _parse_line(line_number: int, line: str) -> Student:
        fields = line.split(",")
        if len(fields) != FIELD_COUNT:
            raise MissingFieldError(
                line_number,
                f"Expected 3 fields (ID, Name, Score) but found {len(fields)}. Line content: '{line}'",
            )

        raw_id, full_name, raw_score = (field.strip() for field in fields)
        if not raw_id or not full_name or not raw_score:
            raise MissingFieldError(line_number, f"One or more fields are empty. Line content: '{line}'")

        try:
            student_id = int(raw_id)
        except ValueError:
            raise InvalidScoreFormatError(line_number, f"Student ID '{raw_id}' is not a valid integer.") from None

        try:
            score = int(raw_score)
        except ValueError:
            raise InvalidScoreFormatError(line_number, f"Score '{raw_score}' is not a valid integer.") from None

        if not 0 <= score <= 100:
            print(f"Warning - Line {line_number}: Score {score} is outside typical range (0-100)")

        return Student(id=student_id, full_name=full_name, score=score)

    def calculate_grade_distribution(self) -> Dict[str, int]:
        """Count students per grade; every grade A-F is present."""
        distribution = {grade: 0 for grade in GRADES}
        for student in self.students.get_all():
            distribution[student.grade] += 1
        return distribution

    def average_score(self) -> float:
        """Mean score, 0.0 for an empty repository."""
        students = self.students.get_all()
        if not students:
            return 0.0
        return sum(s.score for s in students) / len(students)

    def write_report_to_file(self, path: Union[str, Path]) -> None:
        """Write the grade report for the stored students to ``path``."""
        students = self.students.get_all()

        with open(path, 'w', encoding='utf-8') as f:
            f.write("=== STUDENT GRADE REPORT ===\n")
            f.write(f"Generated on: {datetime.now():%Y-%m-%d %H:%M:%S}\n")
            f.write(f"Total Students: {len(students)}\n")
            f.write("\n")

            f.write("STUDENT RESULTS:\n")
            f.write("=" * 50 + "\n")
            for student in students:
                f.write(f"{student}\n")

            f.write("\n")
            f.write("GRADE DISTRIBUTION:\n")
            f.write("=" * 20 + "\n")
            for grade, count in self.calculate_grade_distribution().items():
                f.write(f"Grade {grade}: {count} students\n")

            f.write("\n")
            f.write(f"Average Score: {self.average_score():.2f}\n")

    def run(self) -> None:
        """Create the sample file, read it back and write the report."""
        print("=== School Grading System ===")
        print()

        input_file = self.config_service.get_grading_input_file()
        report_file = self.config_service.get_grading_report_file()

        try:
            print("Creating sample student data file...")
            self.create_sample_data_file(input_file)
            print(f"Sample data created in: {input_file}")
            print()

            print(f"Reading students from file: {input_file}")
            students = self.read_students_from_file(input_file)
            print(f"Successfully read {len(students)} students.")
            print()

            print("Students loaded:")
            for student in students:
                print(f"  • {student}")
            print()

            print(f"Writing report to file: {report_file}")
            self.write_report_to_file(report_file)
            print("Report generated successfully!")
            print()

            print("Check the following files:")
            print(f"  • Input file: {Path(input_file).resolve()}")
            print(f"  • Output file: {Path(report_file).resolve()}")
        except FileNotFoundError as e:
            print(f"File Error: {e}")
            print("Please ensure the input file exists and try again.")
        except InvalidScoreFormatError as e:
            print(f"Score Format Error: {e}")
            print("Please check that all scores are valid integers.")
        except MissingFieldError as e:
            print(f"Missing Field Error: {e}")
            print("Please ensure each line has exactly 3 fields: ID, Name, Score")
        except StudentFileError as e:
            print(f"Student File Error: {e}")
        except OSError as e:
            print(f"File Error: {e}")
