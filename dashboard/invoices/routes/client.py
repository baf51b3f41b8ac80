from flask import Response, abort, jsonify, redirect, render_template, request

from dashboard import cache, db
from dashboard.cache_tools import view_cache_key
from dashboard.customers.models.customer import Customer
from dashboard.invoices import LISTING_PATH, bp_client_user
from dashboard.invoices.actions import create_invoice, delete_invoice, update_invoice
from dashboard.invoices.models.action_result import Redirect, State
from dashboard.invoices.models.invoice import Invoice, InvoiceStatus

def _render_form(title, action, state, values):
    return render_template('invoice_form.html',
        title=title,
        action=action,
        state=state,
        values=values,
        customers=Customer.query.order_by(Customer.name).all(),
        statuses=[s.name for s in InvoiceStatus])

@bp_client_user.route('/', strict_slashes=False)
@cache.cached(key_prefix=view_cache_key)
def get_invoices():
    '''
    Invoices listing. Is cached till any invoice action invalidates it
    '''
    invoices = Invoice.query.order_by(Invoice.date.desc(), Invoice.id)
    return render_template('invoices.html', invoices=invoices)

@bp_client_user.route('/create', methods=['GET', 'POST'])
def create_invoice_page():
    '''
    GET requests serve invoice creation form.
    POST requests create an invoice
    '''
    state = State()
    if request.method == 'POST':
        result = create_invoice(request.form)
        if isinstance(result, Redirect):
            return redirect(result.target)
        state = result
    return _render_form('Create Invoice', request.path, state, request.form)

@bp_client_user.route('/<invoice_id>/edit', methods=['GET', 'POST'])
def edit_invoice_page(invoice_id):
    '''
    GET requests serve invoice editing form.
    POST requests update the invoice
    '''
    state = State()
    if request.method == 'POST':
        result = update_invoice(invoice_id, request.form)
        if isinstance(result, Redirect):
            return redirect(result.target)
        state = result
        values = request.form
    else:
        invoice = db.session.get(Invoice, invoice_id)
        if not invoice:
            abort(Response(f"No invoice {invoice_id} was found", status=404))
        values = {
            'customerId': invoice.customer_id,
            'amount': str(invoice.amount_major),
            'status': invoice.status.name
        }
    return _render_form('Edit Invoice', request.path, state, values)

@bp_client_user.route('/<invoice_id>/delete', methods=['POST'])
def delete_invoice_page(invoice_id):
    delete_invoice(invoice_id)
    return redirect(LISTING_PATH)

@bp_client_user.route('/<invoice_id>')
def get_invoice(invoice_id):
    '''Returns the invoice in JSON'''
    invoice = db.session.get(Invoice, invoice_id)
    if not invoice:
        abort(Response(f"No invoice {invoice_id} was found", status=404))
    return jsonify(invoice.to_dict())
