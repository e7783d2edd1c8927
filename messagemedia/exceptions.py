"""messagemedia.exceptions
core exceptions raised by the client

Copyright (c) 2016-present, Facebook, Inc.
All rights reserved.

This source code is licensed under the BSD-style license found in the
LICENSE file in the root directory of this source tree. An additional grant
of patent rights can be found in the PATENTS file in the same directory.
"""

class MessageMediaError(Exception):
  """Generic package error."""
  pass

class RemoteFault(MessageMediaError):
  """Raised when the gateway, or the path to it, reports a failure.

  Args:
    code: fault code as reported by the service (e.g. 'soap:Client'), or
        None if the failure did not come with one
    message: human-readable description
  """

  def __init__(self, code, message):
    super(RemoteFault, self).__init__('%s: %s' % (code, message))
    self.code = code
    self.message = message

class TransportError(RemoteFault):
  """Network failure or HTTP error without a SOAP fault body."""
  pass

class InvalidResponseError(RemoteFault):
  """Response could not be read as a SOAP envelope."""
  pass
