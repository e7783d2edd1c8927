"""messagemedia.client
method-per-operation client for the MessageMedia SOAP API

Copyright (c) 2016-present, Facebook, Inc.
All rights reserved.

This source code is licensed under the BSD-style license found in the
LICENSE file in the root directory of this source tree. An additional grant
of patent rights can be found in the PATENTS file in the same directory.
"""

from messagemedia.codes import Format, SendMode
from messagemedia.exceptions import InvalidResponseError
from messagemedia.message import Message
from messagemedia.transport import SOAP_ENDPOINT, SoapTransport


class Client(object):
  """A light-weight wrapper around the MessageMedia SOAP API.

  The credentials are not authenticated until a request is actually made;
  bad credentials surface as a RemoteFault from the first call.

  Args:
    username: MessageMedia user id
    password: MessageMedia password
    debug: log request and response envelopes

  kwargs:
    endpoint: override the service URL
    timeout: seconds to wait on the gateway (default: no limit)
    transport: use this transport instead of building a SoapTransport
  """

  def __init__(self, username, password, debug=False, **kwargs):
    self.credentials = {
      'api:userId': username,
      'api:password': password,
    }
    self.transport = kwargs.pop('transport', None)
    if self.transport is None:
      self.transport = SoapTransport(
        endpoint=kwargs.pop('endpoint', SOAP_ENDPOINT),
        debug=debug,
        timeout=kwargs.pop('timeout', None))

  def __repr__(self):
    return 'MessageMedia client for %s' % self.credentials['api:userId']

  def send_message(self, destination_number, content, message_id=None,
                   source_number=None, delivery_report=True):
    """Sends a message to a single recipient.

    If a message_id is given it is returned with any replies or delivery
    reports produced by this message.  Without a source_number the message
    goes out from the MessageMedia rotary.

    Returns:
      the send result, e.g. {'@sent': '1', '@scheduled': '0', '@failed': '0'}
    """
    message = Message(content=content, format=Format.SMS,
                      origin=source_number, validity_period=1,
                      delivery_report=delivery_report)
    message.add_recipient(message_id, destination_number)
    return self.send_messages([message])

  def send_messages(self, messages):
    """Sends several pre-built Message instances in one request.

    Returns:
      the send result for the whole batch
    """
    body = {
      'api:messages': {
        '@sendMode': SendMode.NORMAL.value,
        'api:message': [m.render() for m in messages],
      }
    }
    return self._call('send_messages', body)

  def get_user_info(self):
    """Gets the credit info and other metadata of the account."""
    return self._call('check_user')

  def check_replies(self, max_replies=None):
    """Checks for replies that have not been confirmed yet.

    The same replies come back on every call until confirm_replies is called
    with their receipt ids.

    Args:
      max_replies: limit the size of the response

    Returns:
      the result dict, with 'replies' always a (possibly empty) list of
      reply dicts
    """
    body = {}
    if max_replies is not None:
      body['api:maxReplies'] = max_replies
    result = self._call('check_replies', body)
    return _unwrap(result, 'replies', 'reply')

  def confirm_replies(self, reply_ids):
    """Confirms replies received through check_replies.

    Returns:
      integer number of replies the gateway confirmed
    """
    body = {
      'api:replies': {
        'api:reply': [{'@receiptId': reply_id} for reply_id in reply_ids]
      }
    }
    result = self._call('confirm_replies', body)
    return _confirmed(result)

  def check_reports(self, max_reports=None):
    """Checks for delivery reports (a.k.a. delivery receipts).

    Like replies, reports are returned again until confirmed with
    confirm_reports.

    Returns:
      the result dict, with 'reports' always a list
    """
    body = {}
    if max_reports is not None:
      body['api:maxReports'] = max_reports
    result = self._call('check_reports', body)
    return _unwrap(result, 'reports', 'report')

  def confirm_reports(self, report_ids):
    """Confirms delivery reports received through check_reports.

    Returns:
      integer number of reports the gateway confirmed
    """
    body = {
      'api:reports': {
        'api:report': [{'@receiptId': report_id} for report_id in report_ids]
      }
    }
    result = self._call('confirm_reports', body)
    return _confirmed(result)

  def get_blocked_numbers(self, max_recipients=None):
    """Lists blocked numbers, at most max_recipients of them if given."""
    body = {}
    if max_recipients is not None:
      body['api:maximumRecipients'] = max_recipients
    result = self._call('get_blocked_numbers', body)
    return _unwrap(result, 'recipients', 'recipient')

  def block_numbers(self, numbers):
    """Adds numbers to the blocked list."""
    return self._call('block_numbers', _recipients_body(numbers))

  def unblock_numbers(self, numbers):
    """Removes numbers previously added with block_numbers."""
    return self._call('unblock_numbers', _recipients_body(numbers))

  def delete_scheduled_messages(self, message_ids):
    """Deletes messages that were sent with a scheduled time.

    Each id goes out in its own api:messages wrapper rather than as members
    of a single collection; the gateway expects this shape.
    """
    body = {
      'api:messages': [
        {'api:message': {'@messageId': message_id}}
        for message_id in message_ids
      ]
    }
    return self._call('delete_scheduled_messages', body)

  def _call(self, operation_name, body=None):
    """Sends an authenticated request and returns the operation's result.

    Args:
      operation_name: snake_case SOAP operation
      body: requestBody contents, or None to send credentials only

    Raises:
      RemoteFault (or a subclass) on any failure
    """
    message = {'api:authentication': self.credentials}
    if body is not None:
      message['api:requestBody'] = body
    response = self.transport.call(operation_name, message)
    try:
      return response['%s_response' % operation_name]['result']
    except (KeyError, TypeError):
      raise InvalidResponseError(
        None, 'no result in %s response' % operation_name)


def _unwrap(result, collection, item):
  """Lifts result[collection][item] up to result[collection].

  A missing or empty collection becomes an empty list.
  """
  result = dict(result or {})
  if result.get(collection):
    result[collection] = result[collection].get(item, [])
  else:
    result[collection] = []
  return result


def _confirmed(result):
  try:
    return int(result['@confirmed'])
  except (KeyError, TypeError, ValueError):
    raise InvalidResponseError(None, 'no confirmed count in result')


def _recipients_body(numbers):
  return {
    'api:recipients': {
      'api:recipient': list(numbers)
    }
  }
