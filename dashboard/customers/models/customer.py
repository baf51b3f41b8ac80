'''Customer model'''
from uuid import uuid4

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from dashboard import db

class Customer(db.Model): #type: ignore
    '''Customer an invoice is issued to'''
    __tablename__ = 'customers'

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    image_url = Column(String(255))
    invoices = relationship('Invoice', back_populates='customer', lazy='dynamic')

    def __repr__(self):
        return f"<Customer: {self.id}>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'image_url': self.image_url
        }
