from datetime import date
from decimal import Decimal
from typing import List
from models.employee import Employee
from utils.exceptions import NotFound


class MockHRISAPI:
    """Mock HRIS roster standing in for the employee records service"""

    # Sample employee data
    MOCK_EMPLOYEES = [
        {
            "employee_id": "E001", "employee_number": "EMP-001",
            "first_name": "Maria", "last_name": "Santos",
            "department": "Human Resources", "position": "HR Manager",
            "employment_type": "regular", "hire_date": "2019-01-15", "basic_salary": "45000",
            "sss_number": "33-1234567-8", "philhealth_number": "12-345678901-2",
            "pagibig_number": "1234-5678-9012", "tin_number": "123-456-789-000"
        },
        {
            "employee_id": "E002", "employee_number": "EMP-002",
            "first_name": "Juan", "last_name": "Dela Cruz",
            "department": "Engineering", "position": "Software Engineer",
            "employment_type": "regular", "hire_date": "2020-05-01", "basic_salary": "55000",
            "sss_number": "33-2345678-9", "philhealth_number": "12-456789012-3",
            "pagibig_number": "2345-6789-0123", "tin_number": "234-567-890-000"
        },
        {
            "employee_id": "E003", "employee_number": "EMP-003",
            "first_name": "Ana", "last_name": "Rodriguez",
            "department": "Marketing", "position": "Marketing Specialist",
            "employment_type": "regular", "hire_date": "2021-02-15", "basic_salary": "35000",
            "sss_number": "33-3456789-0", "philhealth_number": "12-567890123-4",
            "pagibig_number": "3456-7890-1234", "tin_number": "345-678-901-000"
        },
        {
            "employee_id": "E004", "employee_number": "EMP-004",
            "first_name": "Carlos", "last_name": "Mendoza",
            "department": "Finance", "position": "Accountant",
            "employment_type": "regular", "hire_date": "2018-08-01", "basic_salary": "42000",
            "sss_number": "33-4567890-1", "philhealth_number": "12-678901234-5",
            "pagibig_number": "4567-8901-2345", "tin_number": "456-789-012-000"
        },
        {
            "employee_id": "E005", "employee_number": "EMP-005",
            "first_name": "Isabel", "last_name": "Garcia",
            "department": "Operations", "position": "Operations Manager",
            "employment_type": "regular", "hire_date": "2017-03-20", "basic_salary": "50000",
            "sss_number": "33-5678901-2", "philhealth_number": "12-789012345-6",
            "pagibig_number": "5678-9012-3456", "tin_number": "567-890-123-000"
        },
        {
            "employee_id": "E006", "employee_number": "EMP-006",
            "first_name": "Roberto", "last_name": "Torres",
            "department": "Sales", "position": "Sales Executive",
            "employment_type": "regular", "hire_date": "2020-11-01", "basic_salary": "38000",
            "sss_number": "33-6789012-3", "philhealth_number": "12-890123456-7",
            "pagibig_number": "6789-0123-4567", "tin_number": "678-901-234-000"
        },
        {
            "employee_id": "E007", "employee_number": "EMP-007",
            "first_name": "Sofia", "last_name": "Reyes",
            "department": "Customer Service", "position": "CS Representative",
            "employment_type": "probationary", "hire_date": "2023-03-01", "basic_salary": "28000",
            "sss_number": "33-7890123-4", "philhealth_number": "12-901234567-8",
            "pagibig_number": "7890-1234-5678", "tin_number": "789-012-345-000"
        },
        {
            "employee_id": "E008", "employee_number": "EMP-008",
            "first_name": "Miguel", "last_name": "Castillo",
            "department": "Engineering", "position": "Senior Developer",
            "employment_type": "regular", "hire_date": "2016-07-15", "basic_salary": "65000",
            "sss_number": "33-8901234-5", "philhealth_number": "12-012345678-9",
            "pagibig_number": "8901-2345-6789", "tin_number": "890-123-456-000"
        }
    ]

    def get_all_employees(self) -> List[Employee]:
        """Get list of all employees"""
        return [self._to_employee(emp) for emp in self.MOCK_EMPLOYEES]

    def get_employee(self, employee_id: str) -> Employee:
        """Get a specific employee"""
        employee = next((e for e in self.MOCK_EMPLOYEES if e['employee_id'] == employee_id), None)

        if not employee:
            raise NotFound(f"Employee {employee_id} not found")

        return self._to_employee(employee)

    def _to_employee(self, data: dict) -> Employee:
        return Employee(
            employee_id=data['employee_id'],
            employee_number=data['employee_number'],
            first_name=data['first_name'],
            last_name=data['last_name'],
            department=data['department'],
            position=data['position'],
            basic_salary=Decimal(data['basic_salary']),
            employment_type=data['employment_type'],
            hire_date=date.fromisoformat(data['hire_date']),
            sss_number=data['sss_number'],
            philhealth_number=data['philhealth_number'],
            pagibig_number=data['pagibig_number'],
            tin_number=data['tin_number']
        )
