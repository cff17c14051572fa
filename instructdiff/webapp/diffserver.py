#!/usr/bin/env python
# -*- coding:utf-8 -*-

import json
import logging
import sys

from tornado import ioloop, web, escape, netutil, httpserver

from ..args import ConfigBackedParser, add_generic_args, add_web_args, add_store_args
from ..diff_format import serialize_diff
from ..diffing import diff
from ..log import logger
from ..revisions import (
    RevisionStore, RevisionNotFound, InvalidRevisionContent, compare_revisions,
)


# Separate logger for server entrypoint
_logger = logging.getLogger(__name__)


class InstructdiffHandler(web.RequestHandler):
    def initialize(self, **params):
        self.params = params

    def write_error(self, status_code, **kwargs):
        # Errors are reported as {"error": message}
        message = self._reason
        exc_info = kwargs.get('exc_info', None)
        if exc_info:
            (etype, value, traceback) = exc_info
            if isinstance(value, web.HTTPError) and value.log_message:
                message = value.log_message % value.args
        self.set_header('Content-Type', 'application/json; charset=UTF-8')
        self.finish(json.dumps({'error': message}))

    def get_json_body(self):
        try:
            body = json.loads(escape.to_unicode(self.request.body))
        except ValueError:
            raise web.HTTPError(400, 'Invalid request body: expecting a json object.')
        if not isinstance(body, dict):
            raise web.HTTPError(400, 'Invalid request body: expecting a json object.')
        return body

    @property
    def store(self):
        store = self.params.get('store', None)
        if store is None:
            raise web.HTTPError(400, 'Server was started without a revision store.')
        return store


class ApiRevisionDiffHandler(InstructdiffHandler):
    def post(self):
        body = self.get_json_body()
        old_id = body.get('oldRevisionId')
        new_id = body.get('newRevisionId')
        if not old_id or not new_id:
            raise web.HTTPError(400, 'Missing required parameters')
        if not isinstance(old_id, str) or not isinstance(new_id, str):
            raise web.HTTPError(400, 'Invalid parameters: revision ids must be strings')

        store = self.store
        try:
            comparison = compare_revisions(store, old_id, new_id)
        except RevisionNotFound as e:
            _logger.info('%s', e)
            raise web.HTTPError(404, 'One or both revisions not found')
        except InvalidRevisionContent as e:
            raise web.HTTPError(422, '%s', str(e))
        except Exception:
            logger.exception('Error diffing revisions:')
            raise web.HTTPError(500, 'Failed to calculate diff')

        comparison['diff'] = serialize_diff(comparison['diff'])
        self.finish(comparison)


class ApiDiffHandler(InstructdiffHandler):
    def post(self):
        body = self.get_json_body()
        if 'old' not in body or 'new' not in body:
            raise web.HTTPError(400, 'Missing required parameters')

        try:
            thediff = diff(body['old'], body['new'])
        except Exception:
            logger.exception('Error diffing documents:')
            raise web.HTTPError(500, 'Failed to calculate diff')

        self.finish({'diff': serialize_diff(thediff)})


class ApiRevisionsHandler(InstructdiffHandler):
    def get(self):
        instruction_id = self.get_argument('instructionId', None)
        revisions = []
        for r in self.store.list(instruction_id):
            summary = r.summary()
            summary['instructionId'] = r.instruction_id
            revisions.append(summary)
        self.finish({'revisions': revisions})


def make_app(**params):
    base_url = params.pop('base_url', '/')
    store = params.get('store', None)
    if isinstance(store, str):
        params['store'] = RevisionStore(store)
    handlers = [
        (r'/api/diff', ApiDiffHandler, params),
        (r'/api/revisions', ApiRevisionsHandler, params),
        (r'/api/revisions/diff', ApiRevisionDiffHandler, params),
    ]
    if base_url != '/':
        prefix = base_url.rstrip('/')
        handlers = [
            (prefix + path, cls, params)
            for (path, cls, params) in handlers
        ]

    settings = {
        'base_url': base_url,
    }

    app = web.Application(handlers, **settings)
    app.exit_code = 0
    return app


def init_app(on_port=None, **params):
    _logger.debug('Using params: %s', params)
    port = params.pop('port', 0)
    ip = params.pop('ip', '127.0.0.1')
    app = make_app(**params)
    if port != 0:
        server = app.listen(port, address=ip)
        _logger.info('Listening on %s, port %d', ip, port)
    else:
        sockets = netutil.bind_sockets(0, ip)
        server = httpserver.HTTPServer(app)
        server.add_sockets(sockets)
        for s in sockets:
            _logger.info('Listening on %s, port %d', *s.getsockname()[:2])
            port = s.getsockname()[1]
    if on_port is not None:
        on_port(port)
    return app, server


def main_server(on_port=None, **params):
    app, server = init_app(on_port, **params)
    io_loop = ioloop.IOLoop.current()
    io_loop.start()
    # Clean up after server:
    server.stop()
    return app.exit_code


def _build_arg_parser(prog='instructdiff-server'):
    """
    Creates an argument parser that lets the user specify a port
    and displays a help message.
    """
    description = 'Web API for comparing instruction revisions.'
    parser = ConfigBackedParser(description=description, prog=prog)
    add_generic_args(parser)
    add_web_args(parser)
    add_store_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    arguments = _build_arg_parser().parse_args(args)
    return main_server(port=arguments.port,
                       ip=arguments.ip,
                       base_url=arguments.base_url,
                       store=arguments.store,
                      )


if __name__ == '__main__':
    sys.exit(main())
