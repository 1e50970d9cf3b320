"""Example: monthly payroll through the service layer, in-memory backend."""

from datetime import date

from src.staff_payroll.staff_payroll.container import build_container
from src.staff_payroll.staff_payroll.staff.model import SalaryConfig


def main():
    container = build_container(backend="memory")
    employee = container.staff_service.add_employee(
        name="Demo Staff",
        phone="98765 43210",
        position="Cashier",
        salary=SalaryConfig(monthly_salary=30000, include_pf=True),
    )
    for day in range(1, 29):
        container.attendance_service.mark_attendance(employee.employee_id, date(2025, 4, day), "present")
    container.attendance_service.mark_attendance(employee.employee_id, date(2025, 4, 29), "leave")
    container.attendance_service.mark_attendance(employee.employee_id, date(2025, 4, 30), "absent")

    result = container.payroll_service.calculate_monthly_payroll(employee.employee_id, 2025, 4)
    payslip = container.payroll_service.build_payslip_data(result)
    print(payslip.file_name)
    print(result.summary.to_dict())
    print(result.breakdown.to_dict())


if __name__ == "__main__":
    main()
