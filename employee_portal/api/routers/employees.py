"""
Employee API endpoints of the reference employee service.

Implements the contract consumed by the portal screens:
- GET    /api/employees        list every employee (200)
- POST   /api/employees        create an employee (201)
- PATCH  /api/employees/{id}   update editable fields (200)
- DELETE /api/employees/{id}   delete an employee (204)

``id`` and ``dateOfJoining`` are immutable once created; the update schema
rejects them. ``managerId`` is stored as given and never checked.
"""

from fastapi import APIRouter, HTTPException, Response, status
from sqlmodel import select

from employee_portal.api.dependencies import SessionDep
from employee_portal.core.logging import get_logger
from employee_portal.models.employee import (
    Employee,
    EmployeeCreatePayload,
    EmployeeRecord,
    EmployeeUpdate,
)

logger = get_logger(__name__)

router = APIRouter(
    prefix="/employees",
    tags=["employees"],
    responses={404: {"description": "Employee not found"}},
)


def _get_or_404(session: SessionDep, employee_id: int) -> EmployeeRecord:
    employee = session.get(EmployeeRecord, employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.get("", response_model=list[Employee])
async def list_employees(session: SessionDep):
    """List all employees ordered by id."""
    logger.info("Fetching employees")
    employees = session.exec(select(EmployeeRecord).order_by(EmployeeRecord.id)).all()
    return [Employee.from_record(employee) for employee in employees]


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(employee: EmployeeCreatePayload, session: SessionDep):
    """Create a new employee. The server assigns the id."""
    logger.info(f"Creating new employee: {employee.name}")

    db_employee = EmployeeRecord(
        name=employee.name,
        date_of_joining=employee.date_of_joining,
        department=employee.department.value,
        salary=employee.salary,
        manager_id=employee.manager_id,
        status=employee.status.value,
    )

    session.add(db_employee)
    session.commit()
    session.refresh(db_employee)

    logger.info(f"Employee created successfully with ID: {db_employee.id}")
    return Employee.from_record(db_employee)


@router.patch("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: int,
    employee_update: EmployeeUpdate,
    session: SessionDep,
):
    """Update the editable fields of an employee by ID."""
    logger.info(f"Updating employee {employee_id}")

    employee = _get_or_404(session, employee_id)

    update_data = employee_update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid fields to update",
        )

    for key, value in update_data.items():
        setattr(employee, key, value)

    session.add(employee)
    session.commit()
    session.refresh(employee)

    logger.info(f"Employee {employee_id} updated successfully")
    return Employee.from_record(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: int, session: SessionDep):
    """Delete employee by ID."""
    logger.info(f"Deleting employee {employee_id}")

    employee = _get_or_404(session, employee_id)
    session.delete(employee)
    session.commit()

    logger.info(f"Employee {employee_id} deleted successfully")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
