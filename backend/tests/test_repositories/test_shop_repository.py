"""
Unit tests for ShopRepository

These tests validate repository logic without requiring a database connection.

Author: TM3
Date: 2025-11-02
"""
import logging
from unittest.mock import MagicMock

import pytest
from postgrest.exceptions import APIError

from app.core.errors import NotFoundError, StoreError
from app.domain.shop import CoffeeShop
from app.repositories.shop_repository import ShopRepository


def _row(**fields):
    row = {
        'id': '7c9e6679-7425-40de-944b-e07fc1f90ae7',
        'name': 'Brew & Bean',
        'address': '123 Main St',
        'seating_level': 'lots',
        'vibe': ['cozy', 'quiet'],
        'good_for_work': True,
        'photo_url': None,
        'created_at': '2025-11-02T10:00:00+00:00',
    }
    row.update(fields)
    return row


class TestShopRepository:
    """Test ShopRepository methods against a mocked Supabase client"""

    def test_insert_one_returns_store_row_unchanged(self):
        """insert_one hands back the row exactly as the store sent it"""
        # Arrange: Mock client chain table().insert().execute()
        mock_client = MagicMock()
        stored = _row()
        mock_client.table.return_value.insert.return_value.execute.return_value.data = [stored]

        # Act
        repo = ShopRepository(mock_client)
        shop = repo.insert_one({'name': 'Brew & Bean'})

        # Assert
        assert shop == stored
        assert shop['created_at'] == '2025-11-02T10:00:00+00:00'
        mock_client.table.assert_called_once_with('coffee_shops')
        mock_client.table.return_value.insert.assert_called_once_with({'name': 'Brew & Bean'})

    def test_insert_one_wraps_api_error(self):
        """PostgREST errors become StoreError with the store message"""
        mock_client = MagicMock()
        mock_client.table.return_value.insert.return_value.execute.side_effect = APIError({
            'message': 'new row violates row-level security policy',
            'code': '42501',
            'hint': None,
            'details': None,
        })

        repo = ShopRepository(mock_client)
        with pytest.raises(StoreError) as exc:
            repo.insert_one({'name': 'X'})

        assert exc.value.message == 'new row violates row-level security policy'
        assert exc.value.code == '42501'

    def test_insert_one_without_returned_row(self):
        mock_client = MagicMock()
        mock_client.table.return_value.insert.return_value.execute.return_value.data = []

        with pytest.raises(StoreError):
            ShopRepository(mock_client).insert_one({'name': 'X'})

    def test_row_off_model_is_returned_and_logged(self, caplog):
        """A committed delete still returns its row even if it breaks the model"""
        mock_client = MagicMock()
        odd = _row(seating_level='Lots', name='')
        mock_client.table.return_value.delete.return_value.eq.return_value.execute.return_value.data = [odd]

        with caplog.at_level(logging.WARNING, logger='app.repositories.base'):
            shop = ShopRepository(mock_client).delete_by_id(odd['id'])

        assert shop == odd
        assert 'does not match CoffeeShop' in caplog.text

    def test_find_by_id_returns_none_when_not_found(self):
        mock_client = MagicMock()
        select = mock_client.table.return_value.select.return_value
        select.eq.return_value.limit.return_value.execute.return_value.data = []

        repo = ShopRepository(mock_client)

        assert repo.find_by_id('missing') is None
        select.eq.assert_called_once_with('id', 'missing')

    def test_find_recent_orders_by_created_at(self):
        mock_client = MagicMock()
        select = mock_client.table.return_value.select.return_value
        select.order.return_value.execute.return_value.data = [_row(), _row(id='2', name='Other')]

        shops = ShopRepository(mock_client).find_recent()

        assert [shop['name'] for shop in shops] == ['Brew & Bean', 'Other']
        select.order.assert_called_once_with('created_at', desc=True)

    def test_delete_by_id_returns_deleted_shop(self):
        mock_client = MagicMock()
        delete = mock_client.table.return_value.delete.return_value
        delete.eq.return_value.execute.return_value.data = [_row()]

        shop = ShopRepository(mock_client).delete_by_id('7c9e6679-7425-40de-944b-e07fc1f90ae7')

        assert shop['id'] == '7c9e6679-7425-40de-944b-e07fc1f90ae7'
        delete.eq.assert_called_once_with('id', '7c9e6679-7425-40de-944b-e07fc1f90ae7')

    def test_delete_by_id_raises_not_found(self):
        mock_client = MagicMock()
        mock_client.table.return_value.delete.return_value.eq.return_value.execute.return_value.data = []

        with pytest.raises(NotFoundError) as exc:
            ShopRepository(mock_client).delete_by_id('gone')

        assert exc.value.table == 'coffee_shops'
        assert exc.value.record_id == 'gone'

    def test_custom_table_name(self):
        mock_client = MagicMock()
        mock_client.table.return_value.select.return_value.execute.return_value.data = []

        ShopRepository(mock_client, 'shops_staging').find_all()

        mock_client.table.assert_called_once_with('shops_staging')


class TestCoffeeShopModel:

    def test_null_vibe_becomes_empty_list(self):
        assert CoffeeShop(**_row(vibe=None)).vibe == []

    def test_unknown_seating_level_rejected(self):
        with pytest.raises(ValueError):
            CoffeeShop(**_row(seating_level='huge'))
