'''
Invoice model
'''
from decimal import Decimal
import enum
from uuid import uuid4

from sqlalchemy import Column, Date, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from dashboard import db

class InvoiceStatus(enum.Enum):
    ''' Invoice statuses '''
    pending = 0
    paid = 1

class Invoice(db.Model): #type: ignore
    '''
    Invoice model. Amount is kept in cents
    '''
    __tablename__ = 'invoices'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    customer_id = Column(String(36), ForeignKey('customers.id'), nullable=False)
    customer = relationship('Customer', back_populates='invoices')
    amount = Column(Integer, nullable=False)
    status = Column(Enum(InvoiceStatus), nullable=False)
    date = Column(Date, nullable=False, index=True)

    def __repr__(self):
        return f"<Invoice: {self.id}>"

    @property
    def amount_major(self) -> Decimal:
        '''Amount in dollars'''
        return Decimal(self.amount) / 100

    def to_dict(self):
        '''
        Returns dictionary of the invoice ready to be jsonified
        '''
        return {
            'id': self.id,
            'customer_id': self.customer_id,
            'customer': self.customer.name if self.customer else None,
            'amount': self.amount,
            'status': self.status.name if self.status else None,
            'date': self.date.strftime('%Y-%m-%d') if self.date else None
        }
