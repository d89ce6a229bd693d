# lightmvc

Building blocks for a small, self-contained web server, with no third-party
dependencies:

- `lightmvc.jsonvalue`: a mutable `Json` value type, a `JsonParser` and `loads`
- `lightmvc.response`: `Response`, which renders a complete HTTP/1.1 message
- `lightmvc.inifile`: `IniFile` and `Value` for `[section]` / `key = value` files
- `lightmvc.strutil`: string helpers (`trim`, `split`, `split_any`, `join`,
  `capitalize`, `compare`, `to_int`, `to_double`, `is_numeric`, …)
- `lightmvc.sockets`: `Socket`, `ClientSocket` and a non-blocking `ServerSocket`
- `lightmvc.poller`: `EventPoller`, epoll-style readiness over sockets
  (uses `select.epoll` where available, otherwise `selectors`)
- `lightmvc.objectpool`: a thread-safe `ObjectPool`
- `lightmvc.singleton`: `instance(cls)` / `reset(cls)` for shared instances
- `lightmvc.system`: `System`, which raises resource limits and creates `<root>/log`

## Installing

```
pip install .
```

## Examples

JSON values and HTTP responses:

```python
from lightmvc.jsonvalue import Json, loads
from lightmvc.response import Response

user = Json()
user["name"] = "kitty"
user["age"] = 18
str(user)                      # '{"age":18,"name":"kitty"}'  (keys sorted)

doc = loads('{"items": [1, 2.5, true]}')
doc.get("items").get(1).as_double()   # 2.5

resp = Response()
resp.json(str(user))
resp.render()   # 'HTTP/1.1 200 OK\r\nContent-Type: application/json; charset: utf-8\r\n...'
Response().page_not_found()    # a fixed 404 page
```

`Json` string output writes string contents as they are, without escaping,
and the parser keeps escapes in strings as written. Numbers have no exponent
part.

INI files:

```python
from lightmvc.inifile import IniFile

ini = IniFile()
ini.set("server", "port", 8080)
int(ini.get("server", "port"))  # 8080
ini.save("server.ini")          # sections and keys written in sorted order

loaded = IniFile("server.ini")
loaded.has("server", "port")    # True
```

`load` raises `OSError` when the file cannot be read and `ValueError` when a
key appears before any section.

Sockets and polling:

```python
from lightmvc.sockets import ServerSocket
from lightmvc.poller import EventMask, EventPoller

server = ServerSocket("127.0.0.1", 0)
poller = EventPoller(edge_triggered=False)
poller.create(16)
poller.add(server, data="listener", events=EventMask.IN)
for event in poller.wait(100):
    conn = event.sock.accept()
```

Socket failures raise `OSError`.

## What it does not do

The package provides the pieces above but no running server: there is no
command to start, no HTTP request parsing, no routing of paths to handlers or
controllers, no logger and no worker thread pool. An application has to
combine `ServerSocket`, `EventPoller` and `Response` itself.

## Tests

```
pip install .[test]
pytest
```