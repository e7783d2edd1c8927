"""messagemedia
python client to the MessageMedia SOAP API

The gateway sends SMS and voice messages, collects replies and delivery
reports, and manages the account's blocked numbers.

Copyright (c) 2016-present, Facebook, Inc.
All rights reserved.

This source code is licensed under the BSD-style license found in the
LICENSE file in the root directory of this source tree. An additional grant
of patent rights can be found in the PATENTS file in the same directory.
"""

from .client import Client
from .codes import Format, SendMode
from .exceptions import (MessageMediaError, RemoteFault, TransportError,
                         InvalidResponseError)
from .message import Message, Recipient
