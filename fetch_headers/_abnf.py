# We use native strings for all the re patterns, and compile them with
# re.compile in the modules that need them. The header store keeps names and
# values as text, so unlike a wire parser there is no conversion to
# bytestrings.

# https://svn.tools.ietf.org/svn/wg/httpbis/specs/rfc7230.html#rule.token.separators
#   token          = 1*tchar
#
#   tchar          = "!" / "#" / "$" / "%" / "&" / "'" / "*"
#                  / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~"
#                  / DIGIT / ALPHA
#                  ; any VCHAR, except delimiters
token = r"[-!#$%&'*+.^_`|~0-9a-zA-Z]+"

# https://svn.tools.ietf.org/svn/wg/httpbis/specs/rfc7230.html#header.fields
#  field-name     = token
field_name = token

# The standard says:
#
#  field-value    = *( field-content / obs-fold )
#  field-content  = field-vchar [ 1*( SP / HTAB ) field-vchar ]
#  field-vchar    = VCHAR / obs-text
#
# https://tools.ietf.org/html/rfc5234#appendix-B.1
#
#   VCHAR          =  %x21-7E
#                  ; visible (printing) characters
#
# https://svn.tools.ietf.org/svn/wg/httpbis/specs/rfc7230.html#rule.quoted-string
#   obs-text       = %x80-FF
#
# A Headers object is not a parser: it doesn't strip leading/trailing
# whitespace and doesn't care where the whitespace sits, it only refuses
# characters that could never appear in a field value on the wire (CR, LF,
# NUL and the other controls, DEL, and anything that doesn't fit in an
# octet). obs-fold is refused too, since it needs a CRLF.
vchar = r"\x21-\x7e"
obs_text = r"\x80-\xff"
field_value = r"[\t {vchar}{obs_text}]*".format(**globals())
