# app/modules/employees/repository.py
from typing import List, Optional
from sqlalchemy import func

from app.shared.database.models import Employee, InboundOrder
from app.shared.repository import BaseRepository

class EmployeeRepository(BaseRepository[Employee]):
    """
    Repositorio de empleados
    """
    model = Employee

    def count_inbound_orders(self, employee_id: Optional[int] = None) -> List:
        """Órdenes de entrada por empleado, 0 si no registró ninguna"""
        query = self.db.query(
            Employee.id,
            Employee.card_number_id,
            Employee.first_name,
            Employee.last_name,
            Employee.warehouse_id,
            func.count(InboundOrder.id).label('inbound_orders_count')
        ).outerjoin(InboundOrder, InboundOrder.employee_id == Employee.id)\
         .group_by(
             Employee.id,
             Employee.card_number_id,
             Employee.first_name,
             Employee.last_name,
             Employee.warehouse_id
         )

        if employee_id is not None:
            query = query.filter(Employee.id == employee_id)

        return query.order_by(Employee.id).all()
