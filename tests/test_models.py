import unittest
from datetime import datetime, timezone

from employee_portal.core.errors import DraftValidationError
from employee_portal.core.formatting import format_date, format_salary, status_class
from employee_portal.models.employee import (
    Department,
    Employee,
    EmployeeDraft,
    EmployeeEditForm,
    EmployeeStatus,
    format_timestamp,
)

from tests.utils import MOCK_EMPLOYEES, filled_draft


class EmployeeDraftTests(unittest.TestCase):
    def test_draft_defaults_to_active_with_empty_fields(self):
        draft = EmployeeDraft()

        self.assertEqual(draft.status, "ACTIVE")
        self.assertEqual(draft.name, "")
        self.assertEqual(draft.manager_id, "")

    def test_payload_coerces_strings_to_wire_types(self):
        wire = filled_draft().to_payload().to_wire()

        self.assertEqual(
            wire,
            {
                "name": "Jane Smith",
                "dateOfJoining": "2025-08-18T00:00:00.000Z",
                "department": "IT",
                "salary": 75000.5,
                "managerId": 2,
                "status": "ACTIVE",
            },
        )
        self.assertIsInstance(wire["salary"], float)
        self.assertIsInstance(wire["managerId"], int)

    def test_payload_tolerates_surrounding_whitespace_in_numbers(self):
        wire = filled_draft(salary=" 1000 ", manager_id=" 7 ").to_payload().to_wire()

        self.assertEqual(wire["salary"], 1000.0)
        self.assertEqual(wire["managerId"], 7)

    def test_missing_department_is_a_validation_error(self):
        with self.assertRaises(DraftValidationError) as context:
            filled_draft(department="").to_payload()

        self.assertEqual(list(context.exception.errors), ["department"])

    def test_every_blank_field_is_reported(self):
        with self.assertRaises(DraftValidationError) as context:
            EmployeeDraft(status="").to_payload()

        self.assertEqual(
            set(context.exception.errors),
            {"name", "dateOfJoining", "department", "salary", "managerId", "status"},
        )

    def test_whitespace_only_name_is_rejected(self):
        with self.assertRaises(DraftValidationError) as context:
            filled_draft(name="   ").to_payload()

        self.assertIn("name", context.exception.errors)

    def test_invalid_numbers_are_rejected(self):
        cases = [
            ("salary", {"salary": "abc"}),
            ("salary", {"salary": "-1"}),
            ("salary", {"salary": "10.005"}),
            ("salary", {"salary": "NaN"}),
            ("salary", {"salary": "1e400"}),
            ("managerId", {"manager_id": "1.5"}),
            ("managerId", {"manager_id": "0"}),
        ]
        for field, overrides in cases:
            with self.subTest(overrides=overrides):
                with self.assertRaises(DraftValidationError) as context:
                    filled_draft(**overrides).to_payload()
                self.assertIn(field, context.exception.errors)

    def test_unknown_choice_is_rejected(self):
        with self.assertRaises(DraftValidationError) as context:
            filled_draft(department="Legal", status="RETIRED").to_payload()

        self.assertEqual(set(context.exception.errors), {"department", "status"})

    def test_invalid_date_is_rejected(self):
        with self.assertRaises(DraftValidationError) as context:
            filled_draft(date_of_joining="18/08/2025").to_payload()

        self.assertIn("dateOfJoining", context.exception.errors)

    def test_field_can_be_addressed_by_wire_name(self):
        draft = EmployeeDraft().with_field("managerId", "3")

        self.assertEqual(draft.manager_id, "3")
        with self.assertRaises(KeyError):
            draft.with_field("id", "1")


class EmployeeEditFormTests(unittest.TestCase):
    def test_prefill_from_complete_record(self):
        form = EmployeeEditForm.from_employee(Employee.model_validate(MOCK_EMPLOYEES[0]))

        self.assertEqual(
            form.model_dump(by_alias=True),
            {
                "name": "John Doe",
                "department": "IT",
                "salary": "80000",
                "managerId": "1",
                "status": "ACTIVE",
            },
        )

    def test_prefill_falls_back_for_missing_fields(self):
        form = EmployeeEditForm.from_employee(Employee(id=9))

        self.assertEqual(form.name, "")
        self.assertEqual(form.department, "")
        self.assertEqual(form.salary, "")
        self.assertEqual(form.manager_id, "")
        self.assertEqual(form.status, "ACTIVE")

    def test_prefill_keeps_fractional_salary(self):
        form = EmployeeEditForm.from_employee(Employee(id=9, salary=75000.5))

        self.assertEqual(form.salary, "75000.5")

    def test_update_payload_never_carries_id_or_join_date(self):
        form = EmployeeEditForm.from_employee(Employee.model_validate(MOCK_EMPLOYEES[3]))

        wire = form.to_payload().to_wire()

        self.assertEqual(set(wire), {"name", "department", "salary", "managerId", "status"})
        self.assertEqual(wire["status"], "NOT_ACTIVE")
        self.assertEqual(wire["salary"], 120000.0)

    def test_update_payload_requires_manager(self):
        form = EmployeeEditForm.from_employee(Employee(id=9, name="A", department="HR", salary=1))

        with self.assertRaises(DraftValidationError) as context:
            form.to_payload()

        self.assertEqual(list(context.exception.errors), ["managerId"])


    def test_salary_too_large_for_a_float_is_rejected(self):
        form = EmployeeEditForm(name="A", department="HR", salary="1e309", manager_id="1")

        with self.assertRaises(DraftValidationError) as context:
            form.to_payload()

        self.assertEqual(context.exception.errors, {"salary": "Value is out of range."})

    def test_prefill_keeps_department_outside_the_closed_set(self):
        form = EmployeeEditForm.from_employee(Employee(id=9, department="Engineering"))

        self.assertEqual(form.department, "Engineering")


class WireFormatTests(unittest.TestCase):
    def test_employee_reads_camel_case(self):
        employee = Employee.model_validate(MOCK_EMPLOYEES[3])

        self.assertEqual(employee.manager_id, 1)
        self.assertEqual(employee.status, EmployeeStatus.NOT_ACTIVE)
        self.assertEqual(employee.department, Department.FINANCE)
        self.assertEqual(employee.date_of_joining.day, 1)

    def test_timestamp_format(self):
        aware = datetime(2025, 8, 18, 10, 0, 0, 123456, tzinfo=timezone.utc)

        self.assertEqual(format_timestamp(aware), "2025-08-18T10:00:00.123Z")
        self.assertEqual(format_timestamp(datetime(2025, 1, 2)), "2025-01-02T00:00:00.000Z")


class FormattingTests(unittest.TestCase):
    def test_format_salary(self):
        self.assertEqual(format_salary(80000.0), "$80,000.00")
        self.assertEqual(format_salary(75000.5), "$75,000.50")
        self.assertEqual(format_salary(None), "")

    def test_format_date(self):
        self.assertEqual(format_date(datetime(2025, 8, 1, 10)), "8/1/2025")
        self.assertEqual(format_date(None), "")

    def test_status_class(self):
        self.assertEqual(status_class(EmployeeStatus.ACTIVE), "status active")
        self.assertEqual(status_class(EmployeeStatus.NOT_ACTIVE), "status not-active")


if __name__ == "__main__":
    unittest.main()
