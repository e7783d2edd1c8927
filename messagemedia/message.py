"""messagemedia.message
outbound message model and its wire rendering

Copyright (c) 2016-present, Facebook, Inc.
All rights reserved.

This source code is licensed under the BSD-style license found in the
LICENSE file in the root directory of this source tree. An additional grant
of patent rights can be found in the PATENTS file in the same directory.
"""

import collections

from messagemedia.codes import Format


Recipient = collections.namedtuple('Recipient',
                                   ['message_id', 'destination_number'])


class Message(object):
  """A single message, possibly fanned out to several recipients.

  Constructing a message by hand is only needed for Client.send_messages:
    message = Message(content='hello', origin='+61400000000')
    message.add_recipient('1234', '+61400000001')

  Args:
    content: the message body
    format: Format.SMS (default) or Format.VOICE
    origin: source number; if None the gateway picks one from its rotary
    validity_period: how long the gateway keeps trying to deliver
    delivery_report: whether to request a delivery report
    scheduled: optional datetime for deferred delivery
  """

  def __init__(self, content=None, format=Format.SMS, origin=None,
               validity_period=1, delivery_report=True, scheduled=None):
    self.content = content
    self.format = format
    self.origin = origin
    self.validity_period = validity_period
    self.delivery_report = delivery_report
    self.scheduled = scheduled
    self.recipients = []

  def __repr__(self):
    return 'Message to %d recipient(s)' % len(self.recipients)

  def add_recipient(self, message_id, destination_number):
    """Adds a recipient.

    Numbers are neither validated nor deduplicated; the gateway does that.

    Args:
      message_id: identifier echoed back in replies and delivery reports,
          or None
      destination_number: the number to deliver to
    """
    self.recipients.append(Recipient(message_id, destination_number))

  def render(self):
    """Renders the message as the dict expected inside api:messages.

    Only the first recipient's message_id makes it onto the wire, as the
    message element carries a single messageId attribute.

    Returns a dict of the form: {
      '@format': 'SMS',
      '@messageId': '1234',
      'api:recipients': {'api:recipient': ['+61400000001']},
      'api:origin': '+61400000000',
      'api:deliveryReport': 'true',
      'api:validityPeriod': 1,
      'api:content': 'hello',
    }
    """
    rendered = {
      '@format': Format(self.format).value,
    }
    if self.recipients and self.recipients[0].message_id is not None:
      rendered['@messageId'] = self.recipients[0].message_id
    rendered['api:recipients'] = {
      'api:recipient': [r.destination_number for r in self.recipients]
    }
    if self.origin is not None:
      rendered['api:origin'] = self.origin
    rendered['api:deliveryReport'] = 'true' if self.delivery_report else 'false'
    rendered['api:validityPeriod'] = self.validity_period
    if self.scheduled is not None:
      rendered['api:scheduled'] = self.scheduled.isoformat()
    rendered['api:content'] = self.content
    return rendered
