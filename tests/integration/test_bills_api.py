"""
Integration tests for the bills API.
"""


class TestLineEndpoint:
    """Tests for POST /api/bills/line."""

    def test_percent_edit(self, client):
        response = client.post('/api/bills/line', json={
            'itemName': 'Window Section',
            'length': 10,
            'quantity': 3,
            'salesRate': 50,
            'discount': 10,
            'discountSource': 'percent',
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data['totalGrossAmount'] == 1500.0
        assert data['discountAmount'] == 150.0
        assert data['totalNetAmount'] == 1350.0
        assert data['itemName'] == 'Window Section'

    def test_amount_edit(self, client):
        response = client.post('/api/bills/line', json={
            'length': 10, 'quantity': 3, 'salesRate': 50,
            'discount': 10, 'discountAmount': 300,
            'discountSource': 'amount',
        })

        data = response.get_json()
        assert data['discount'] == 20.0
        assert data['totalNetAmount'] == 1200.0

    def test_bad_discount_source(self, client):
        response = client.post('/api/bills/line', json={'discountSource': 'both'})

        assert response.status_code == 400
        assert response.get_json()['status'] == 'error'

    def test_body_must_be_object(self, client):
        response = client.post('/api/bills/line', json=[1, 2])

        assert response.status_code == 400

    def test_negative_quantity_rejected(self, client):
        response = client.post('/api/bills/line', json={'length': 10, 'quantity': -3, 'salesRate': 50})

        assert response.status_code == 400
        data = response.get_json()
        assert data['status'] == 'error'
        assert data['errors'] == {'quantity': "'quantity' must be a number >= 0."}

    def test_every_bad_field_reported(self, client):
        response = client.post('/api/bills/line', json={
            'length': 'ten', 'rate': -1, 'discountSource': 'both',
        })

        assert response.status_code == 400
        assert set(response.get_json()['errors']) == {'length', 'rate', 'discountSource'}

    def test_blank_fields_allowed(self, client):
        response = client.post('/api/bills/line', json={'length': '', 'quantity': None, 'salesRate': '12.5'})

        assert response.status_code == 200
        assert response.get_json()['totalGrossAmount'] == 0.0


class TestSummaryEndpoint:
    """Tests for POST /api/bills/summary."""

    def test_summary(self, client, aluminium_items):
        response = client.post('/api/bills/summary', json={'items': aluminium_items})

        assert response.status_code == 200
        data = response.get_json()
        assert data['subtotal'] == 3500.0
        assert data['totalGrossAmount'] == 3500.0
        assert data['totalDiscountAmount'] == 150.0
        assert data['totalNetAmount'] == 3350.0
        assert data['itemCount'] == 2
        assert data['formatted']['totalNetAmount'] == 'Rs 3,350.00'

    def test_empty_items(self, client):
        response = client.post('/api/bills/summary', json={'items': []})

        data = response.get_json()
        assert data['itemCount'] == 0
        assert data['totalNetAmount'] == 0.0

    def test_items_required(self, client):
        response = client.post('/api/bills/summary', json={})

        assert response.status_code == 400
        assert 'items' in response.get_json()['message']

    def test_items_must_be_list(self, client):
        response = client.post('/api/bills/summary', json={'items': 'nope'})

        assert response.status_code == 400

    def test_garbage_items_are_zero(self, client):
        response = client.post('/api/bills/summary', json={'items': [None, 'x', {'quantity': 'a'}]})

        data = response.get_json()
        assert data['itemCount'] == 3
        assert data['totalGrossAmount'] == 0.0

    def test_large_amounts(self, client):
        response = client.post('/api/bills/summary', json={
            'items': [{'length': 1e30, 'quantity': 1, 'salesRate': 1}],
        })

        assert response.status_code == 200
        data = response.get_json()
        assert data['totalGrossAmount'] == 1e30
        assert data['formatted']['subtotal'] == 'Rs 1,000,000,000,000,000,000,000,000,000,000.00'


class TestPendingEndpoint:
    """Tests for POST /api/bills/pending."""

    def test_pending(self, client):
        response = client.post('/api/bills/pending', json={'total': 5000, 'received': '1250.50'})

        assert response.get_json() == {'pending': 3749.5}

    def test_overpaid(self, client):
        response = client.post('/api/bills/pending', json={'total': 100, 'received': 500})

        assert response.get_json() == {'pending': 0.0}

    def test_negative_received_rejected(self, client):
        response = client.post('/api/bills/pending', json={'total': 100, 'received': -5})

        assert response.status_code == 400
        assert 'received' in response.get_json()['errors']
