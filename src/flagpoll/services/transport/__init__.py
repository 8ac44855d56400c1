from .http_transport import HTTPTransport as HTTPTransport, AioHTTPTransport as AioHTTPTransport
