"""messagemedia.tests.message_tests
tests for the Message model

Copyright (c) 2016-present, Facebook, Inc.
All rights reserved.

This source code is licensed under the BSD-style license found in the
LICENSE file in the root directory of this source tree. An additional grant
of patent rights can be found in the PATENTS file in the same directory.
"""

import datetime
import unittest

from messagemedia.codes import Format
from messagemedia.message import Message, Recipient


class MessageRenderTestCase(unittest.TestCase):
  """Testing message.Message.render."""

  def test_single_recipient(self):
    """The first recipient's id becomes the message id."""
    message = Message(content='hello')
    message.add_recipient('id1', '+61400000001')
    rendered = message.render()
    self.assertEqual(rendered['@messageId'], 'id1')
    self.assertEqual(rendered['api:recipients'],
                     {'api:recipient': ['+61400000001']})
    self.assertEqual(rendered['api:content'], 'hello')

  def test_defaults(self):
    message = Message(content='hello')
    message.add_recipient(None, '+61400000001')
    self.assertEqual(message.render(), {
      '@format': 'SMS',
      'api:recipients': {'api:recipient': ['+61400000001']},
      'api:deliveryReport': 'true',
      'api:validityPeriod': 1,
      'api:content': 'hello',
    })

  def test_no_origin_key_when_unset(self):
    """A message without an origin has no origin key at all."""
    message = Message(content='hello')
    message.add_recipient('id1', '+61400000001')
    self.assertNotIn('api:origin', message.render())

  def test_origin(self):
    message = Message(content='hello', origin='+61400000000')
    message.add_recipient('id1', '+61400000001')
    self.assertEqual(message.render()['api:origin'], '+61400000000')

  def test_delivery_report_is_a_string(self):
    message = Message(content='hello', delivery_report=False)
    message.add_recipient('id1', '+61400000001')
    self.assertEqual(message.render()['api:deliveryReport'], 'false')
    message.delivery_report = True
    self.assertEqual(message.render()['api:deliveryReport'], 'true')

  def test_voice_format(self):
    message = Message(content='hello', format=Format.VOICE)
    message.add_recipient('id1', '+61400000001')
    self.assertEqual(message.render()['@format'], 'voice')

  def test_setters(self):
    """Attributes set after construction are rendered as set."""
    message = Message()
    message.content = 'later'
    message.validity_period = 3
    message.origin = '+61400000000'
    message.add_recipient('id1', '+61400000001')
    rendered = message.render()
    self.assertEqual(rendered['api:content'], 'later')
    self.assertEqual(rendered['api:validityPeriod'], 3)
    self.assertEqual(rendered['api:origin'], '+61400000000')

  def test_multiple_recipients_only_first_id(self):
    """Only the first recipient's id is carried on the message."""
    message = Message(content='hello')
    message.add_recipient('id1', '+61400000001')
    message.add_recipient('id2', '+61400000002')
    message.add_recipient(None, '+61400000003')
    rendered = message.render()
    self.assertEqual(rendered['@messageId'], 'id1')
    self.assertEqual(rendered['api:recipients']['api:recipient'],
                     ['+61400000001', '+61400000002', '+61400000003'])

  def test_first_recipient_without_id(self):
    message = Message(content='hello')
    message.add_recipient(None, '+61400000001')
    message.add_recipient('id2', '+61400000002')
    self.assertNotIn('@messageId', message.render())

  def test_duplicate_recipients_kept(self):
    message = Message(content='hello')
    message.add_recipient('id1', '+61400000001')
    message.add_recipient('id1', '+61400000001')
    self.assertEqual(message.recipients,
                     [Recipient('id1', '+61400000001')] * 2)

  def test_scheduled(self):
    message = Message(content='hello',
                      scheduled=datetime.datetime(2016, 5, 1, 9, 30))
    message.add_recipient('id1', '+61400000001')
    self.assertEqual(message.render()['api:scheduled'], '2016-05-01T09:30:00')

  def test_no_scheduled_key_when_unset(self):
    message = Message(content='hello')
    message.add_recipient('id1', '+61400000001')
    self.assertNotIn('api:scheduled', message.render())

  def test_no_recipients(self):
    """Rendering without recipients is not checked locally."""
    rendered = Message(content='hello').render()
    self.assertEqual(rendered['api:recipients'], {'api:recipient': []})
    self.assertNotIn('@messageId', rendered)
