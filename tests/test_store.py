"""굿즈샵/장바구니 API 테스트 — 굿즈 등록, 옵션 교체, 장바구니, 주문.

Storefront and cart API tests.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy import func, select

from app.models.merchandise import MerchandiseOption
from tests.conftest import API, auth_header, join, make_manager

PRODUCT = f"{API}/product"
MERCHANDISE = f"{API}/merchandise"
CART = f"{API}/cart"


@pytest_asyncio.fixture
async def manager_token(db, community, other_user, other_token) -> str:
    """커뮤니티 매니저 토큰 (other_user를 매니저로 지정)."""
    await make_manager(db, await join(db, other_user, community))
    return other_token


@pytest_asyncio.fixture
async def product(client: AsyncClient, community, manager_token) -> dict:
    res = await client.post(PRODUCT, json={
        "communityId": community.id,
        "productName": "Official Shop",
        "categories": ["Apparel", "Albums"],
    }, headers=auth_header(manager_token))
    assert res.status_code == 201
    return res.json()["data"]


@pytest_asyncio.fixture
async def merchandise(client: AsyncClient, product, manager_token) -> dict:
    res = await client.post(MERCHANDISE, json={
        "productId": product["productId"],
        "categoryId": product["categories"][0]["categoryId"],
        "title": "Tour T-shirt",
        "price": 30000,
        "imageUrls": ["http://img/front.png"],
        "options": [
            {"optionName": "M", "optionPrice": 30000, "stock": 5},
            {"optionName": "L", "optionPrice": 32000, "stock": 1},
        ],
    }, headers=auth_header(manager_token))
    assert res.status_code == 201
    return res.json()["data"]


class TestMerchandise:
    """굿즈 판매글 테스트."""

    async def test_product_categories(self, product):
        assert [c["name"] for c in product["categories"]] == ["Apparel", "Albums"]

    async def test_member_cannot_create_product(self, client: AsyncClient, fan_member, fan_token, community):
        res = await client.post(PRODUCT, json={"communityId": community.id, "productName": "Bootleg"},
                                headers=auth_header(fan_token))
        assert res.status_code == 403

    async def test_create_and_read(self, client: AsyncClient, merchandise, product):
        assert [o["optionName"] for o in merchandise["options"]] == ["M", "L"]
        assert [i["imageUrl"] for i in merchandise["images"]] == ["http://img/front.png"]

        res = await client.get(MERCHANDISE, params={"productId": product["productId"]})
        assert [m["merchandisePostId"] for m in res.json()["data"]] == [merchandise["merchandisePostId"]]

        res = await client.get(f"{MERCHANDISE}/{merchandise['merchandisePostId']}")
        assert res.json()["data"]["title"] == "Tour T-shirt"

    async def test_category_from_other_product_rejected(self, client: AsyncClient, product, manager_token,
                                                         community):
        other = await client.post(PRODUCT, json={"communityId": community.id, "productName": "Second",
                                                 "categories": ["Misc"]}, headers=auth_header(manager_token))
        foreign_category = other.json()["data"]["categories"][0]["categoryId"]

        res = await client.post(MERCHANDISE, json={
            "productId": product["productId"],
            "categoryId": foreign_category,
            "title": "Wrong",
            "price": 1000,
        }, headers=auth_header(manager_token))
        assert res.status_code == 400

    @pytest.mark.filterwarnings("error::sqlalchemy.exc.SAWarning")
    async def test_update_replaces_options(self, client: AsyncClient, db, merchandise, manager_token):
        res = await client.patch(f"{MERCHANDISE}/{merchandise['merchandisePostId']}", json={
            "title": "Tour T-shirt v2",
            "options": [{"optionName": "XL", "optionPrice": 35000, "stock": 2}],
        }, headers=auth_header(manager_token))
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["title"] == "Tour T-shirt v2"
        assert [o["optionName"] for o in data["options"]] == ["XL"]
        assert len(data["images"]) == 1

        # 두 번째 교체에서도 재사용된 ID가 세션의 옛 객체와 충돌하지 않음
        res = await client.patch(f"{MERCHANDISE}/{merchandise['merchandisePostId']}", json={
            "options": [{"optionName": "S", "optionPrice": 30000, "stock": 1}],
            "imageUrls": ["http://img/back.png"],
        }, headers=auth_header(manager_token))
        assert res.status_code == 200
        assert [o["optionName"] for o in res.json()["data"]["options"]] == ["S"]
        assert [i["imageUrl"] for i in res.json()["data"]["images"]] == ["http://img/back.png"]

        count = await db.scalar(
            select(func.count()).select_from(MerchandiseOption)
            .where(MerchandiseOption.merchandise_post_id == merchandise["merchandisePostId"])
        )
        assert count == 1

    async def test_remove(self, client: AsyncClient, merchandise, manager_token, fan_member, fan_token):
        res = await client.delete(f"{MERCHANDISE}/{merchandise['merchandisePostId']}",
                                  headers=auth_header(fan_token))
        assert res.status_code == 403

        res = await client.delete(f"{MERCHANDISE}/{merchandise['merchandisePostId']}",
                                  headers=auth_header(manager_token))
        assert res.status_code == 200
        res = await client.get(f"{MERCHANDISE}/{merchandise['merchandisePostId']}")
        assert res.status_code == 404


class TestCart:
    """장바구니 테스트."""

    async def _add(self, client, token, merchandise, option_index: int = 0, quantity: int = 1):
        return await client.post(f"{CART}/items", json={
            "merchandisePostId": merchandise["merchandisePostId"],
            "merchandiseOptionId": merchandise["options"][option_index]["optionId"],
            "quantity": quantity,
        }, headers=auth_header(token))

    async def test_empty_cart_created_lazily(self, client: AsyncClient, fan_user, fan_token):
        res = await client.get(CART, headers=auth_header(fan_token))
        assert res.status_code == 200
        assert res.json()["data"]["items"] == []
        assert res.json()["data"]["totalPrice"] == 0

    async def test_repeated_option_merges(self, client: AsyncClient, merchandise, fan_user, fan_token):
        await self._add(client, fan_token, merchandise, quantity=1)
        res = await self._add(client, fan_token, merchandise, quantity=2)
        assert res.status_code == 201
        items = res.json()["data"]["items"]
        assert len(items) == 1
        assert items[0]["quantity"] == 3
        assert res.json()["data"]["totalPrice"] == 90000

    async def test_quantity_and_stock_rules(self, client: AsyncClient, merchandise, fan_user, fan_token):
        assert (await self._add(client, fan_token, merchandise, quantity=0)).status_code == 400
        assert (await self._add(client, fan_token, merchandise, option_index=1, quantity=2)).status_code == 400

    async def test_option_of_other_merchandise_rejected(self, client: AsyncClient, merchandise, product,
                                                        manager_token, fan_user, fan_token):
        other = (await client.post(MERCHANDISE, json={
            "productId": product["productId"],
            "title": "Poster",
            "price": 10000,
            "options": [{"optionName": "A2", "optionPrice": 10000, "stock": 10}],
        }, headers=auth_header(manager_token))).json()["data"]

        res = await client.post(f"{CART}/items", json={
            "merchandisePostId": merchandise["merchandisePostId"],
            "merchandiseOptionId": other["options"][0]["optionId"],
        }, headers=auth_header(fan_token))
        assert res.status_code == 400

    async def test_update_and_remove_own_item(self, client: AsyncClient, merchandise, fan_user, fan_token,
                                              other_token):
        cart = (await self._add(client, fan_token, merchandise)).json()["data"]
        item_id = cart["items"][0]["cartItemId"]

        res = await client.patch(f"{CART}/items/{item_id}", json={"quantity": 4}, headers=auth_header(fan_token))
        assert res.json()["data"]["items"][0]["quantity"] == 4

        res = await client.patch(f"{CART}/items/{item_id}", json={"quantity": 1}, headers=auth_header(other_token))
        assert res.status_code == 404

        res = await client.delete(f"{CART}/items/{item_id}", headers=auth_header(fan_token))
        assert res.json()["data"]["items"] == []

    async def test_checkout_decrements_stock(self, client: AsyncClient, db, merchandise, fan_user, fan_token):
        await self._add(client, fan_token, merchandise, quantity=2)
        await self._add(client, fan_token, merchandise, option_index=1, quantity=1)

        res = await client.post(f"{CART}/checkout", headers=auth_header(fan_token))
        assert res.status_code == 200
        assert res.json()["data"] == {"itemCount": 3, "totalPrice": 2 * 30000 + 32000}

        stocks = (await db.execute(
            select(MerchandiseOption.name, MerchandiseOption.stock).order_by(MerchandiseOption.id)
        )).all()
        assert [tuple(row) for row in stocks] == [("M", 3), ("L", 0)]

        res = await client.get(CART, headers=auth_header(fan_token))
        assert res.json()["data"]["items"] == []

    async def test_checkout_empty_cart(self, client: AsyncClient, fan_user, fan_token):
        res = await client.post(f"{CART}/checkout", headers=auth_header(fan_token))
        assert res.status_code == 400
