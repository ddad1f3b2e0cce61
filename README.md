# anidb-client

An asynchronous client for the AniDB HTTP API. It fetches anime records
and turns the XML the server sends back into Python dataclasses and enums.

## Installation

```
pip install anidb-client
```

## Usage

```python
import asyncio

from anidb_client.client import AniDbHttpClient


async def fetch() -> None:
    async with AniDbHttpClient() as anidb:
        anime = await anidb.get_anime("17110")
        print(anime.anime_type, anime.episode_count)
        for title in anime.titles:
            print(title.lang, title.name)
        print(anime.to_json(indent=2))


asyncio.run(fetch())
```

IDs are always passed as strings. `get_anime` returns an
`anidb_client.anime.Anime`, whose lists (titles, related and similar
anime, recommendations, creators, resources, tags, characters, episodes)
are empty when the document leaves them out.

`AniDbHttpClient.base_url` holds the API URL with the client
identification parameters that every request carries.

### Rate limiting

AniDB bans clients that send requests too quickly. By default the client
lets through at most one request every two seconds; the first request
goes out at once. Pass a different interval as `rate_limit`, in seconds
or as a `datetime.timedelta`, or `0` to turn limiting off. A negative
interval raises `ValueError`.

```python
AniDbHttpClient(rate_limit=4.0)
```

### Using your own HTTP client

An `httpx.AsyncClient` can be passed as `client`. It is used as it is and
is left open when the AniDB client is closed; a client created internally
is closed by `aclose()` or on leaving the `async with` block.

### Errors

Every failure is raised as a subclass of `anidb_client.errors.ApiError`:

- `RequestError`: the request could not be sent or the response not read.
- `HttpError`: AniDB answered with an `<error>` document. The exception
  carries its `status` (200 when the document gives none) and `message`
  ("Empty error message" when the document has no text).
- `UrlParseError`: the request URL could not be built.
- `DeserializeError`: the response was not well-formed XML or not a valid
  anime document, including unknown enum values such as an unknown
  resource type.
- `ParseError`: an episode type code was not one of the known codes.

AniDB always replies with a success status, so errors are detected from the
body of the response.

Requests are logged at debug level through the `anidb_client.client`
logger.

### Parsing documents you already have

```python
from anidb_client.anime import Anime

anime = Anime.from_xml(xml_text)
data = anime.to_dict()
text = anime.to_json(indent=None)
```

`to_dict()` returns plain data suitable for JSON; enum members appear
under their names (for example `"TvSeries"`) or, for enums read from
strings, under the value AniDB writes.

## Command line

Fetch one anime and write it to a JSON file:

```
anidb-anime 17110
```

Options:

- `anime_id`: the AniDB anime id (default `17110`).
- `-o`, `--output`: the file to write (default `anime.json`).
- `--rate-limit`: seconds between requests; `0` disables the limit.

The command exits with status 1 and prints the error if the request,
parsing or writing fails.

## Limits

The client covers only the `anime` request of the HTTP API. It does not
fetch other kinds of records, does not log in, and keeps no cache: every
call to `get_anime` sends a request.