"""
Response schemas passed to Gemini.

Gemini accepts an OpenAPI subset with upper-case type names. Keys here
are snake_case so replies map straight onto the reply serializers.
"""

RECEIPT_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'merchant': {'type': 'STRING', 'description': 'Name of the merchant, store, or payer (for income)'},
        'date': {'type': 'STRING', 'description': 'Date of transaction in YYYY-MM-DD format'},
        'amount': {'type': 'NUMBER', 'description': 'Total amount of the transaction'},
        'category': {'type': 'STRING', 'description': 'Category of expense or income source'},
        'description': {'type': 'STRING', 'description': 'Brief description of items purchased or income detail'},
        'type': {
            'type': 'STRING',
            'format': 'enum',
            'enum': ['INCOME', 'EXPENSE'],
            'description': 'Whether this is money coming in (INCOME) or going out (EXPENSE)',
        },
    },
    'required': ['merchant', 'amount', 'category', 'type'],
}

HEALTH_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'score': {'type': 'NUMBER'},
        'status': {'type': 'STRING', 'format': 'enum', 'enum': ['Critical', 'Warning', 'Healthy', 'Excellent']},
        'cash_flow_status': {'type': 'STRING', 'description': 'A short sentence describing cash flow health'},
        'projected_savings': {'type': 'NUMBER'},
        'risks': {'type': 'ARRAY', 'items': {'type': 'STRING'}},
        'recommendations': {'type': 'ARRAY', 'items': {'type': 'STRING'}},
    },
    'required': ['score', 'status', 'risks', 'recommendations'],
}

INSIGHTS_SCHEMA = {
    'type': 'ARRAY',
    'items': {
        'type': 'OBJECT',
        'properties': {
            'type': {'type': 'STRING', 'format': 'enum', 'enum': ['SAVINGS', 'PATTERN', 'ALERT']},
            'title': {'type': 'STRING'},
            'description': {'type': 'STRING'},
            'impact_amount': {'type': 'NUMBER'},
        },
        'required': ['type', 'title', 'description'],
    },
}

ANOMALIES_SCHEMA = {
    'type': 'ARRAY',
    'items': {
        'type': 'OBJECT',
        'properties': {
            'transaction_id': {'type': 'STRING'},
            'reason': {'type': 'STRING'},
            'severity': {'type': 'STRING', 'format': 'enum', 'enum': ['HIGH', 'MEDIUM', 'LOW']},
        },
        'required': ['transaction_id', 'reason', 'severity'],
    },
}

CASHFLOW_SCHEMA = {
    'type': 'ARRAY',
    'items': {
        'type': 'OBJECT',
        'properties': {
            'date': {'type': 'STRING'},
            'balance': {'type': 'NUMBER'},
            'type': {'type': 'STRING', 'format': 'enum', 'enum': ['PREDICTED']},
        },
        'required': ['date', 'balance', 'type'],
    },
}
