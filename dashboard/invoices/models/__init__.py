from .action_result import Redirect, State
from .invoice import Invoice, InvoiceStatus
