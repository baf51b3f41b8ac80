from flask import jsonify

from dashboard.customers import bp_api_user
from dashboard.customers.models.customer import Customer

@bp_api_user.route('/', defaults={'customer_id': None}, strict_slashes=False)
@bp_api_user.route('/<customer_id>')
def get_customers(customer_id):
    '''Returns all or selected customers in JSON'''
    customers = Customer.query.order_by(Customer.name) \
        if customer_id is None \
        else Customer.query.filter_by(id=customer_id)

    return jsonify([entry.to_dict() for entry in customers])
