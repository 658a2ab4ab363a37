"""Compiled grammars for every record id kind.

Every pattern is meant to be used with ``fullmatch`` on a stripped string.
Digits are spelled ``[0-9]``: ``\\d`` would also match non-ASCII digits.
"""

import re

from sierra_record_id.models.record_types import (
    ALL_RECORD_TYPE_CODES,
    API_RECORD_TYPE_TO_RECORD_TYPE_CODE,
)

REC_NUM = r"[1-9][0-9]{5,6}"
CAMPUS_CODE = r"[a-z0-9]{1,5}"
API_HOST = r"[-%._~!$&'()*+,;=a-zA-Z0-9]+"
API_PATH = r"/[-/%._~!$&'()*+,;=:@a-zA-Z0-9]+/"

_CAMPUS_SUFFIX = rf"(?:@(?P<campus_code>{CAMPUS_CODE}))?"
_API_RECORD_TYPES = "|".join(API_RECORD_TYPE_TO_RECORD_TYPE_CODE)
_API_TAIL = rf"/(?P<api_record_type>{_API_RECORD_TYPES})/(?P<rec_num>{REC_NUM}){_CAMPUS_SUFFIX}"

RECORD_NUMBER_RE = re.compile(rf"(?P<rec_num>{REC_NUM}){_CAMPUS_SUFFIX}")

WEAK_RECORD_KEY_RE = re.compile(
    rf"(?P<initial_period>\.?)(?P<record_type_code>[{ALL_RECORD_TYPE_CODES}])"
    rf"(?P<rec_num>{REC_NUM}){_CAMPUS_SUFFIX}"
)

STRONG_RECORD_KEY_RE = re.compile(
    rf"(?P<initial_period>\.?)(?P<record_type_code>[{ALL_RECORD_TYPE_CODES}])"
    rf"(?P<rec_num>{REC_NUM})(?P<check_digit>[0-9x]){_CAMPUS_SUFFIX}"
)

DATABASE_ID_RE = re.compile(r"[0-9]{12,20}")

RELATIVE_V4_API_URL_RE = re.compile(rf"/v4{_API_TAIL}")
RELATIVE_V5_API_URL_RE = re.compile(rf"/v5{_API_TAIL}")

ABSOLUTE_V4_API_URL_RE = re.compile(
    rf"https://(?P<api_host>{API_HOST})(?P<api_path>{API_PATH})v4{_API_TAIL}"
)
ABSOLUTE_V5_API_URL_RE = re.compile(
    rf"https://(?P<api_host>{API_HOST})(?P<api_path>{API_PATH})v5{_API_TAIL}"
)

REC_NUM_RE = re.compile(REC_NUM)
CAMPUS_CODE_RE = re.compile(CAMPUS_CODE)
API_HOST_RE = re.compile(API_HOST)
API_PATH_RE = re.compile(API_PATH)

# Used by the detector only: the version segment that precedes the
# record type and record number at the end of an absolute URL
ABSOLUTE_API_VERSION_RE = re.compile(r"/(v[45])/[^/]+/[^/]+$")
LEADING_DATABASE_ID_DIGITS_RE = re.compile(r"[0-9]{12,}")
