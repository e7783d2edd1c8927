"""messagemedia.transport
SOAP 1.1 transport for the MessageMedia gateway

Copyright (c) 2016-present, Facebook, Inc.
All rights reserved.

This source code is licensed under the BSD-style license found in the
LICENSE file in the root directory of this source tree. An additional grant
of patent rights can be found in the PATENTS file in the same directory.
"""

import logging
import re
from xml.parsers.expat import ExpatError

import requests
import xmltodict

from messagemedia.exceptions import (InvalidResponseError, RemoteFault,
                                     TransportError)


logger = logging.getLogger(__name__)

SOAP_ENDPOINT = 'https://soap.m4u.com.au/'
SOAP_ENV_NAMESPACE = 'http://schemas.xmlsoap.org/soap/envelope/'
API_NAMESPACE = 'http://xml.m4u.com.au/2009'

# Repeated elements that should always parse as lists, even when the gateway
# returns only one of them.
FORCE_LIST = ('reply', 'report', 'recipient')


def camel_case(name):
  """send_messages -> sendMessages"""
  head, *tail = name.split('_')
  return head + ''.join(word.capitalize() for word in tail)


def snake_case(name):
  """checkRepliesResponse -> check_replies_response"""
  return re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name).lower()


def _normalize_key(path, key, value):
  """xmltodict postprocessor: drops namespace prefixes and snake_cases names.

  Namespace declarations are dropped entirely.
  """
  prefix = ''
  if key.startswith('@'):
    prefix, key = '@', key[1:]
    if key == 'xmlns' or key.startswith('xmlns:'):
      return None
  key = key.rpartition(':')[2]
  return prefix + snake_case(key), value


class SoapTransport(object):
  """Posts SOAP envelopes to the gateway and parses the replies.

  Request messages use xmltodict conventions: keys starting with '@' become
  attributes, and elements in the service namespace carry the 'api:' prefix.

  Args:
    endpoint: URL the envelopes are POSTed to
    debug: if True, request and response envelopes are logged
    timeout: seconds passed through to requests; None waits forever
    session: an existing requests.Session to reuse
  """

  def __init__(self, endpoint=SOAP_ENDPOINT, debug=False, timeout=None,
               session=None):
    self.endpoint = endpoint
    self.debug = debug
    self.timeout = timeout
    self._session = session

  def __repr__(self):
    return 'SoapTransport to %s' % self.endpoint

  @property
  def session(self):
    if not self._session:
      self._session = requests.Session()
    return self._session

  def call(self, operation_name, message):
    """Invokes a SOAP operation.

    Args:
      operation_name: snake_case operation name, e.g. 'check_replies'
      message: dict rendered as the operation element's children

    Returns:
      the SOAP Body as a dict with snake_case keys, e.g. {
        'check_replies_response': {'result': {...}}
      }

    Raises:
      RemoteFault: if the gateway replied with a SOAP fault
      TransportError: on network errors or HTTP errors without a fault
      InvalidResponseError: if the reply is not a SOAP envelope
    """
    action = camel_case(operation_name)
    envelope = self.build_envelope(action, message)
    logger.debug('calling %s at %s', action, self.endpoint)
    if self.debug:
      logger.info('request envelope:\n%s', envelope)

    headers = {
      'Content-Type': 'text/xml; charset=utf-8',
      'SOAPAction': '"%s/%s"' % (API_NAMESPACE, action),
    }
    try:
      response = self.session.post(self.endpoint,
                                   data=envelope.encode('utf-8'),
                                   headers=headers,
                                   timeout=self.timeout)
    except requests.RequestException as e:  # log and rethrow as ours
      logger.error('%s network error: %s', action, e)
      raise TransportError(None, str(e))

    if self.debug:
      logger.info('response envelope (HTTP %d):\n%s',
                  response.status_code, response.text)
    try:
      return self.parse_envelope(response.content)
    except InvalidResponseError:
      if not response.ok:
        raise TransportError(response.status_code, response.reason)
      raise

  @staticmethod
  def build_envelope(action, message):
    """Wraps message in a SOAP 1.1 envelope for the given action."""
    return xmltodict.unparse({
      'soapenv:Envelope': {
        '@xmlns:soapenv': SOAP_ENV_NAMESPACE,
        '@xmlns:api': API_NAMESPACE,
        'soapenv:Body': {
          'api:%s' % action: message,
        },
      }
    })

  @staticmethod
  def parse_envelope(content):
    """Extracts the Body of a SOAP envelope.

    Raises:
      RemoteFault if the body holds a SOAP fault
      InvalidResponseError if content is not a SOAP envelope
    """
    try:
      document = xmltodict.parse(content, postprocessor=_normalize_key,
                                 force_list=FORCE_LIST)
    except ExpatError as e:
      raise InvalidResponseError(None, 'unparseable response: %s' % e)
    try:
      body = document['envelope']['body']
    except (KeyError, TypeError):
      raise InvalidResponseError(None, 'response has no SOAP body')
    body = body or {}
    if 'fault' in body:
      fault = body['fault'] or {}
      raise RemoteFault(fault.get('faultcode'), fault.get('faultstring'))
    return body
