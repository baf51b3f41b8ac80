'''
Invoice actions invoked by form submissions.
Each action validates submitted fields, writes them with a single statement,
invalidates the invoices listing and tells the caller where to go next.
Input and store failures of create and update are returned as State,
never raised
'''
from datetime import date, datetime, timezone
import logging
from typing import Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from werkzeug.datastructures import MultiDict

from dashboard import db
from dashboard.cache_tools import revalidate_path
from dashboard.invoices import LISTING_PATH
from dashboard.invoices.forms.invoice import InvoiceForm
from dashboard.invoices.models.action_result import Redirect, State
from dashboard.invoices.models.invoice import Invoice, InvoiceStatus

def _today() -> date:
    return datetime.now(timezone.utc).date()

def _parse(fields) -> InvoiceForm:
    formdata = fields if hasattr(fields, 'getlist') else MultiDict(fields or {})
    form = InvoiceForm(formdata=formdata)
    form.validate()
    return form

def _get_errors(form: InvoiceForm) -> dict[str, list[str]]:
    return {name: list(messages) for name, messages in form.errors.items()}

def create_invoice(fields, previous_state: Optional[State]=None) -> Union[State, Redirect]:
    '''
    Creates an invoice of submitted `customerId`, `amount` (dollars) and `status`.
    `previous_state` is the outcome of the previous submission of the same form.
    It doesn't affect the result
    '''
    logger = logging.getLogger('create_invoice()')
    form = _parse(fields)
    if form.errors:
        logger.info("Invalid input: %s", form.errors)
        return State(errors=_get_errors(form),
                     message='Missing Fields. Failed to Create Invoice.')

    invoice = Invoice(
        customer_id=form.customerId.data,
        amount=form.get_amount_in_cents(),
        status=InvoiceStatus[form.status.data],
        date=_today())
    logger.info("Creating invoice for customer %s: amount %s, status %s, date %s",
                invoice.customer_id, invoice.amount, invoice.status.name,
                invoice.date.strftime('%Y-%m-%d'))
    try:
        db.session.add(invoice)
        db.session.commit()
    except SQLAlchemyError:
        logger.exception("Couldn't insert invoice")
        db.session.rollback()
        return State(message='Database Error: Unable to create invoice.')

    revalidate_path(LISTING_PATH)
    return Redirect(LISTING_PATH)

def update_invoice(invoice_id: str, fields, previous_state: Optional[State]=None) \
        -> Union[State, Redirect]:
    '''
    Sets customer, amount and status of the invoice `invoice_id`.
    Issue date is left intact. Unknown `invoice_id` updates nothing and isn't an error
    '''
    logger = logging.getLogger('update_invoice()')
    form = _parse(fields)
    if form.errors:
        logger.info("Invalid input for %s: %s", invoice_id, form.errors)
        return State(errors=_get_errors(form),
                     message='Missing Fields. Failed to Update Invoice.')

    logger.info("Updating invoice %s", invoice_id)
    try:
        Invoice.query.filter_by(id=invoice_id).update({
            Invoice.customer_id: form.customerId.data,
            Invoice.amount: form.get_amount_in_cents(),
            Invoice.status: InvoiceStatus[form.status.data]
        }, synchronize_session=False)
        db.session.commit()
    except SQLAlchemyError:
        logger.exception("Couldn't update invoice %s", invoice_id)
        db.session.rollback()
        return State(message='Database Error: Unable to update invoice.')

    revalidate_path(LISTING_PATH)
    return Redirect(LISTING_PATH)

def delete_invoice(invoice_id: str):
    '''
    Deletes the invoice `invoice_id` if there is one.
    Store errors aren't handled here and reach the caller
    '''
    logging.getLogger('delete_invoice()').info("Deleting invoice %s", invoice_id)
    Invoice.query.filter_by(id=invoice_id).delete(synchronize_session=False)
    db.session.commit()
    revalidate_path(LISTING_PATH)
