"""messagemedia.codes
wire-level constants understood by the MessageMedia SOAP service

Copyright (c) 2016-present, Facebook, Inc.
All rights reserved.

This source code is licensed under the BSD-style license found in the
LICENSE file in the root directory of this source tree. An additional grant
of patent rights can be found in the PATENTS file in the same directory.
"""
from enum import Enum

class MessageMediaCode(str, Enum):
    """Generic wire constant; the value is what goes into the envelope."""
    pass

class Format(MessageMediaCode):
    """How a message is delivered to the handset.
    """
    SMS = 'SMS'
    VOICE = 'voice'

class SendMode(MessageMediaCode):
    """The sendMode attribute of a messages collection.

    Only 'normal' is used by the client; 'dropAll' and friends are test modes
    on the gateway side.
    """
    NORMAL = 'normal'
    DROP_ALL = 'dropAll'
    DROP_ALL_WITH_ERRORS = 'dropAllWithErrors'
    DROP_ALL_WITH_SUCCESS = 'dropAllWithSuccess'
