from .invoice import InvoiceForm
