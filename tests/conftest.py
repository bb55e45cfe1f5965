import pytest

from alubill import create_app


@pytest.fixture(scope='session')
def app():
    """Create application instance for testing."""
    app = create_app('config.Config')
    app.config['TESTING'] = True
    app.config['DOCUMENT_NUMBER_DIGITS'] = 4
    app.config['CURRENCY_CODE'] = 'PKR'
    return app


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def runner(app):
    """Create CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def aluminium_items():
    """Line items as the sale invoice screen sends them."""
    return [
        {
            '_id': 'a1',
            'itemName': 'Window Section 2"',
            'unit': 'ft',
            'length': 10,
            'quantity': 3,
            'salesRate': 50,
            'discount': 10,
            'discountAmount': 150,
            'color': 'Silver',
            'thickness': '1.2',
        },
        {
            '_id': 'a2',
            'itemName': 'Door Frame',
            'unit': 'ft',
            'length': '12.5',
            'quantity': '2',
            'salesRate': '80',
            'discountAmount': '0',
            'amount': 99999,  # stale value from an earlier edit
        },
    ]
