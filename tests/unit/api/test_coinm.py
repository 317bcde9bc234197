"""
api/coinm 래퍼 테스트 (COIN-M 선물, dapi.binance.com)
"""

import json
from unittest.mock import AsyncMock

import pytest

from binance_sdk.api.coinm import CoinMFutures
from binance_sdk.core.config.loader import ClientConfig
from binance_sdk.core.errors import ParameterRequiredError
from binance_sdk.core.types import ContractType, MarginType


@pytest.fixture
def coinm(client_config: ClientConfig, mock_http_client: AsyncMock) -> CoinMFutures:
    return CoinMFutures(client_config, mock_http_client)


class TestCoinMFuturesClient:
    """CoinMFutures 파사드 테스트"""

    def test_groups(self, coinm: CoinMFutures) -> None:
        for group in (coinm.market, coinm.trade, coinm.data_stream, coinm.portfolio_margin):
            assert group.dispatcher is coinm.dispatcher

    @pytest.mark.asyncio
    async def test_host(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.market.ping()

        request = last_request()
        assert request.host == "https://dapi.binance.com"
        assert request.path == "/dapi/v1/ping"


class TestCoinMMarketApi:
    """COIN-M 시세 API 테스트"""

    @pytest.mark.asyncio
    async def test_klines(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.market.klines("BTCUSD_PERP", "1d", limit=2)

        request = last_request()
        assert request.path == "/dapi/v1/klines"
        assert request.query == "symbol=BTCUSD_PERP&interval=1d&limit=2"

    @pytest.mark.asyncio
    async def test_index_price_klines(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.market.index_price_klines("BTCUSD", "1h")

        request = last_request()
        assert request.path == "/dapi/v1/indexPriceKlines"
        assert request.query == "pair=BTCUSD&interval=1h"

    @pytest.mark.asyncio
    async def test_open_interest_hist(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.market.open_interest_hist("BTCUSD", ContractType.PERPETUAL, "1h")

        request = last_request()
        assert request.host == "https://dapi.binance.com"
        assert request.path == "/futures/data/openInterestHist"
        assert request.query == "pair=BTCUSD&contractType=PERPETUAL&period=1h"

    @pytest.mark.asyncio
    async def test_taker_buy_sell_vol(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.market.taker_buy_sell_vol("BTCUSD", "ALL", "5m")
        assert last_request().path == "/futures/data/takerBuySellVol"

    @pytest.mark.asyncio
    async def test_basis_missing(self, coinm: CoinMFutures) -> None:
        with pytest.raises(ParameterRequiredError) as exc_info:
            await coinm.market.basis("BTCUSD", "", "")

        assert exc_info.value.names == ["contractType", "period"]


class TestCoinMTradeApi:
    """COIN-M 주문/계정 API 테스트"""

    @pytest.mark.asyncio
    async def test_modify_order(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.trade.modify_order("BTCUSD_PERP", "BUY", orderId=1, quantity=2, price=30000)

        request = last_request()
        assert request.method == "PUT"
        assert request.path == "/dapi/v1/order"
        assert request.query.startswith(
            "symbol=BTCUSD_PERP&side=BUY&orderId=1&quantity=2&price=30000&timestamp="
        )

    @pytest.mark.asyncio
    async def test_modify_batch_orders(self, coinm: CoinMFutures, last_request) -> None:
        orders = [{"orderId": 1, "symbol": "BTCUSD_PERP", "side": "BUY", "quantity": "1", "price": "30000"}]
        await coinm.trade.modify_batch_orders(orders)

        request = last_request()
        assert request.method == "PUT"
        assert request.path == "/dapi/v1/batchOrders"
        assert json.loads(request.params["batchOrders"]) == orders

    @pytest.mark.asyncio
    async def test_batch_orders_prebuilt_string(self, coinm: CoinMFutures, last_request) -> None:
        """이미 인코딩된 문자열은 그대로 전송"""
        encoded = '[{"symbol":"BTCUSD_PERP","side":"BUY","type":"MARKET","quantity":"1"}]'
        await coinm.trade.new_batch_orders(encoded)

        assert last_request().params["batchOrders"] == encoded

    @pytest.mark.asyncio
    async def test_get_orders_options_only(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.trade.get_orders(pair="BTCUSD")

        request = last_request()
        assert request.path == "/dapi/v1/allOrders"
        assert request.params["pair"] == "BTCUSD"

    @pytest.mark.asyncio
    async def test_leverage_brackets_versions(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.trade.leverage_brackets(pair="BTCUSD")
        assert last_request().path == "/dapi/v1/leverageBracket"

        await coinm.trade.leverage_brackets_for_symbol(symbol="BTCUSD_PERP")
        assert last_request().path == "/dapi/v2/leverageBracket"

    @pytest.mark.asyncio
    async def test_balance(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.trade.balance(recvWindow=3000)

        request = last_request()
        assert request.path == "/dapi/v1/balance"
        assert request.query.startswith("recvWindow=3000&timestamp=")

    @pytest.mark.asyncio
    async def test_change_margin_type_enum(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.trade.change_margin_type("BTCUSD_PERP", MarginType.CROSSED)

        request = last_request()
        assert request.method == "POST"
        assert request.path == "/dapi/v1/marginType"
        assert request.query.startswith("symbol=BTCUSD_PERP&marginType=CROSSED&timestamp=")


class TestCoinMDataStreamApi:
    """COIN-M listen key 테스트"""

    @pytest.mark.asyncio
    async def test_new_listen_key(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.data_stream.new_listen_key()

        request = last_request()
        assert request.method == "POST"
        assert request.path == "/dapi/v1/listenKey"


class TestCoinMPortfolioMarginApi:
    """COIN-M 포트폴리오 마진 테스트"""

    @pytest.mark.asyncio
    async def test_pm_exchange_info(self, coinm: CoinMFutures, last_request) -> None:
        await coinm.portfolio_margin.pm_exchange_info()
        assert last_request().path == "/dapi/v1/pmExchangeInfo"


class TestRequiredValidation:
    """빈 필수 인자는 I/O 전에 거부"""

    @pytest.mark.asyncio
    async def test_all_coinm_wrappers(
        self, coinm: CoinMFutures, mock_http_client: AsyncMock, required_wrappers
    ) -> None:
        wrappers = required_wrappers(coinm)

        for name, method, count in wrappers:
            with pytest.raises(ParameterRequiredError):
                await method(*([""] * count))

        assert len(wrappers) >= 30
        mock_http_client.request.assert_not_awaited()
