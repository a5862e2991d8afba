"""
Application package initializer.

The project is organised into small layers: ``core`` (configuration,
logging, errors, storage), ``schemas`` (request/response bodies),
``repositories`` (persistence per resource), ``services`` (the generic
resource handler) and ``api`` (routers mounted under
``/integrations``).  Each resource (users, payables, assignors) gets
its own router, schema module and repository.

The ASGI application lives in ``integrations_api.app.main:app``; it is
not imported here so that the payable client can reuse ``core.config``
without building the server.
"""
