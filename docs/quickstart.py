from dataclasses import dataclass
from typing import Any, Dict

from aiohttp import ClientSession

from httpbuilder import BadStatus, Ok, builder, json_reader
from httpbuilder.http.aiohttp import AIOHTTP


@dataclass(frozen=True)
class Item:
    id: int
    name: str


def decode_item(value: Dict[str, Any]) -> Item:
    return Item(id=value["id"], name=value["name"])


async def example():
    async with ClientSession() as session:
        http = AIOHTTP(session)

        # Create an item
        created = await (
            builder.post("https://api.example.com/items")
            .with_bearer_token("my-token")
            .with_json_body({"name": "my-item"})
            .with_timeout(10)
            .with_expect(json_reader(decode_item))
            .send(http, error_reader=json_reader())
        )
        if isinstance(created, Ok):
            print(created.value.data)
        elif isinstance(created.error, BadStatus):
            print(created.error.response.status, created.error.response.data)
        else:
            print(created.error)

        # Search items, bypassing caches
        found = await (
            builder.get("https://api.example.com/items")
            .with_query_params([("q", "my item"), ("limit", "10")])
            .with_cache_buster("_")
            .with_expect(json_reader())
            .send(http)
        )
        print(found)
