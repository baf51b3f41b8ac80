'''Invoice creation and editing form'''
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from flask_wtf import FlaskForm
from wtforms import Field, StringField
from wtforms.validators import AnyOf, DataRequired, StopValidation, ValidationError
from wtforms.widgets import NumberInput

from dashboard.invoices.models.invoice import InvoiceStatus

CUSTOMER_MESSAGE = 'Please select a customer.'
AMOUNT_MESSAGE = 'Please enter an amount greater than $0.'
STATUS_MESSAGE = 'Please select an invoice status.'
AMOUNT_LIMIT_MESSAGE = 'Please enter an amount not greater than $21,474,836.47.'

# Amounts are stored in a 32-bit integer column of cents
MAX_AMOUNT_CENTS = 2**31 - 1
MAX_AMOUNT = Decimal(MAX_AMOUNT_CENTS).scaleb(-2)
# Smallest amount which rounds to a whole cent
MIN_AMOUNT = Decimal('0.005')

def _strip(value):
    return value.strip() if isinstance(value, str) else value

def _is_positive_amount(_form, field):
    # Unparsable input is already reported by AmountField.process_formdata()
    if field.process_errors:
        raise StopValidation()
    if field.data < MIN_AMOUNT:
        raise ValidationError(AMOUNT_MESSAGE)
    if field.data > MAX_AMOUNT:
        raise ValidationError(AMOUNT_LIMIT_MESSAGE)

def to_cents(amount: Decimal) -> int:
    '''Dollars converted to cents, rounded half up'''
    return int((amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))

class AmountField(Field):
    '''
    Amount in dollars. The text is parsed into Decimal before any validator runs.
    Blank input is read as zero. Text which isn't a finite number becomes
    a processing error, so it stays distinguishable from non-positive amounts
    '''
    widget = NumberInput(step='0.01')

    def _value(self):
        if self.raw_data:
            return self.raw_data[0]
        return str(self.data) if self.data is not None else ''

    def process_formdata(self, valuelist):
        text = str(valuelist[0]).strip() if valuelist and valuelist[0] is not None else ''
        if text == '':
            self.data = Decimal(0)
            return
        try:
            amount = Decimal(text)
        except InvalidOperation:
            self.data = None
            raise ValueError(AMOUNT_MESSAGE)
        if not amount.is_finite():
            self.data = None
            raise ValueError(AMOUNT_MESSAGE)
        self.data = amount

class InvoiceForm(FlaskForm):
    '''
    Invoice creation and editing form.
    Is fed with submitted values directly, no CSRF token is expected
    '''
    class Meta:
        csrf = False

    customerId = StringField('Customer', filters=[_strip],
                             validators=[DataRequired(message=CUSTOMER_MESSAGE)])
    amount = AmountField('Amount', validators=[_is_positive_amount])
    status = StringField('Status',
                         validators=[AnyOf([s.name for s in InvoiceStatus], message=STATUS_MESSAGE)])

    def get_amount_in_cents(self) -> int:
        '''Amount converted to cents, rounded half up'''
        return to_cents(self.amount.data)
