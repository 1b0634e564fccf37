"""
Storefront API helpers.

Thin async wrappers over the site's JSON endpoints. Reads are public; the
create / update / delete calls are admin operations and rely on the gateway
attaching the stored bearer token.

Every failure is re-raised as StorefrontAPIError chained to the original
httpx exception. A 401 has already cleared the stored token by the time the
error reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from .errors import StorefrontAPIError
from .gateway import AuthenticatedGateway, status_code_of
from .transport import RequestDescriptor

logger = logging.getLogger(__name__)

# resource name -> collection path
RESOURCES = {
    "products": "/api/products",
    "carousel": "/api/carousel",
    "team": "/api/team",
    "milestones": "/api/milestones",
    "values": "/api/values",
    "contact": "/api/contact",
    "faq": "/api/faq",
    "about": "/api/about",
    "shops": "/api/shops",
    "publicite": "/api/publicite",
}


def _only_set(**params: Any) -> Dict[str, Any]:
    return {k: v for k, v in params.items() if v}


class StorefrontAPI:
    def __init__(self, gateway: AuthenticatedGateway) -> None:
        self.gateway = gateway

    @staticmethod
    def _collection(resource: str) -> str:
        try:
            return RESOURCES[resource]
        except KeyError:
            raise ValueError(f"Unknown storefront resource: {resource}") from None

    async def _request(self, request: RequestDescriptor, failure: str) -> Any:
        try:
            response = await self.gateway.dispatch(request)
        except httpx.HTTPError as exc:
            status = status_code_of(exc)
            logger.warning("%s (status=%s)", failure, status)
            raise StorefrontAPIError(failure, status_code=status) from exc
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("%s (non-JSON body, status=%s)", failure, response.status_code)
            raise StorefrontAPIError(failure, status_code=response.status_code) from exc

    async def _get_or_none(self, path: str, failure: str, any_status: bool = False) -> Optional[Any]:
        """None when the server answered 404, or any error status when `any_status` is set."""
        try:
            return await self._request(RequestDescriptor("GET", path), failure)
        except StorefrontAPIError as e:
            if e.status_code == 404 or (any_status and isinstance(e.__cause__, httpx.HTTPStatusError)):
                return None
            raise

    # --- Products ------------------------------------------------------------

    async def get_products(
        self,
        category: Optional[str] = None,
        bestseller: bool = False,
        new: bool = False,
    ) -> List[Dict[str, Any]]:
        params = _only_set(
            category=category,
            bestseller="true" if bestseller else None,
            new="true" if new else None,
        )
        return await self._request(
            RequestDescriptor("GET", RESOURCES["products"], params=params or None),
            "Failed to fetch products",
        )

    async def get_product(self, product_id: int) -> Dict[str, Any]:
        return await self._request(
            RequestDescriptor("GET", f"{RESOURCES['products']}/{product_id}"),
            "Failed to fetch product",
        )

    # --- Presentation content ------------------------------------------------

    async def get_carousel_images(self) -> List[Dict[str, Any]]:
        return await self._request(RequestDescriptor("GET", RESOURCES["carousel"]), "Failed to fetch carousel images")

    async def get_team_members(self) -> List[Dict[str, Any]]:
        return await self._request(RequestDescriptor("GET", RESOURCES["team"]), "Failed to fetch team members")

    async def get_milestones(self) -> List[Dict[str, Any]]:
        return await self._request(RequestDescriptor("GET", RESOURCES["milestones"]), "Failed to fetch milestones")

    async def get_company_values(self) -> List[Dict[str, Any]]:
        return await self._request(RequestDescriptor("GET", RESOURCES["values"]), "Failed to fetch company values")

    async def get_contact_info(self, info_type: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self._request(
            RequestDescriptor("GET", RESOURCES["contact"], params=_only_set(type=info_type) or None),
            "Failed to fetch contact info",
        )

    async def get_faq_items(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self._request(
            RequestDescriptor("GET", RESOURCES["faq"], params=_only_set(category=category) or None),
            "Failed to fetch FAQ items",
        )

    async def get_about_content(self, section: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self._request(
            RequestDescriptor("GET", RESOURCES["about"], params=_only_set(section=section) or None),
            "Failed to fetch about content",
        )

    async def get_publicite_videos(self, video_type: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self._request(
            RequestDescriptor("GET", RESOURCES["publicite"], params=_only_set(type=video_type) or None),
            "Failed to fetch promotional videos",
        )

    # --- Shops ---------------------------------------------------------------

    async def get_shops(self, location: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self._request(
            RequestDescriptor("GET", RESOURCES["shops"], params=_only_set(location=location) or None),
            "Failed to fetch shops",
        )

    async def get_shop(self, shop_id: int) -> Optional[Dict[str, Any]]:
        """Shop with its staff list, or None when the id is unknown."""
        return await self._get_or_none(f"{RESOURCES['shops']}/{shop_id}", "Failed to fetch shop")

    async def get_shop_slugs(self) -> List[str]:
        shops = await self._request(RequestDescriptor("GET", "/api/espaces"), "Failed to fetch shops")
        return [s["slug"] for s in shops or [] if s.get("slug")]

    async def get_shop_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        return await self._get_or_none(f"/api/espaces/{slug}", "Failed to fetch shop", any_status=True)

    # --- Admin writes --------------------------------------------------------

    async def create(self, resource: str, payload: Dict[str, Any]) -> Any:
        path = self._collection(resource)
        return await self._request(RequestDescriptor("POST", path, json=payload), f"Failed to create {resource} item")

    async def update(self, resource: str, item_id: int, payload: Dict[str, Any]) -> Any:
        path = f"{self._collection(resource)}/{item_id}"
        return await self._request(RequestDescriptor("PUT", path, json=payload), f"Failed to update {resource} item")

    async def remove(self, resource: str, item_id: int) -> Any:
        path = f"{self._collection(resource)}/{item_id}"
        return await self._request(RequestDescriptor("DELETE", path), f"Failed to delete {resource} item")

    async def reorder_milestone(self, milestone_id: int, order: int) -> Any:
        if isinstance(order, bool) or not isinstance(order, int) or order < 1:
            raise ValueError("Order is required and must be a positive number")
        path = f"{RESOURCES['milestones']}/{milestone_id}/reorder"
        return await self._request(RequestDescriptor("PATCH", path, json={"order": order}), "Failed to reorder milestone")

    async def upload_file(self, filename: str, content: bytes, content_type: str = "application/octet-stream") -> Any:
        files = {"file": (filename, content, content_type)}
        return await self._request(RequestDescriptor("POST", "/api/upload", files=files), "Failed to upload file")
