"""Shared fixtures: a miniature reference page and generator configurations."""

import pytest

from apidoc_codegen.config import GeneratorConfig


SAMPLE_DOCUMENT = """<!DOCTYPE html>
<html class="">
<head>
<meta charset="utf-8">
<title>Telegram Bot API</title>
</head>
<body>
<h3><a class="anchor" name="recent-changes" href="#recent-changes"><i class="anchor-icon"></i></a>Recent changes</h3>
<h4><a class="anchor" name="november-17-2023" href="#november-17-2023"><i class="anchor-icon"></i></a>November 17, 2023</h4>
<p>Bot API 7.0 changes.</p>
<h4><a class="anchor" name="making-requests" href="#making-requests"><i class="anchor-icon"></i></a>Making requests</h4>
<p>All queries to the Telegram Bot API must be served over HTTPS.</p>
<h4><a class="anchor" name="user" href="#user"><i class="anchor-icon"></i></a>User</h4>
<p>This object represents a Telegram user or bot.</p>
<table class="table">
<thead>
<tr>
<th>Field</th>
<th>Type</th>
<th>Description</th>
</tr>
</thead>
<tbody>
<tr>
<td>id</td>
<td>Integer</td>
<td>Unique identifier for this user or bot.</td>
</tr>
<tr>
<td>first_name</td>
<td>String</td>
<td>User&#39;s or bot&#39;s first name</td>
</tr>
<tr>
<td>username</td>
<td>String</td>
<td><em>Optional</em>. User&#39;s or bot&#39;s username</td>
</tr>
</tbody>
</table>
<h4><a class="anchor" name="message" href="#message"><i class="anchor-icon"></i></a>Message</h4>
<p>This object represents a message.</p>
<table class="table">
<tbody>
<tr>
<td>message_id</td>
<td>Integer</td>
<td>Unique message identifier inside this chat</td>
</tr>
<tr>
<td>from</td>
<td><a href="#user">User</a></td>
<td><em>Optional</em>. Sender of the message</td>
</tr>
<tr>
<td>entities</td>
<td>Array of Array of Integer</td>
<td><em>Optional</em>. Offsets, see <a href="https://core.telegram.org/api/entities">entities</a></td>
</tr>
</tbody>
</table>
<h4><a class="anchor" name="inputfile" href="#inputfile"><i class="anchor-icon"></i></a>InputFile</h4>
<p>This object represents the contents of a file to be uploaded.</p>
<h4><a class="anchor" name="inputmedia" href="#inputmedia"><i class="anchor-icon"></i></a>InputMedia</h4>
<p>This object represents the content of a media message to be sent. It should be one of</p>
<ul>
<li><a href="#inputmediaphoto">InputMediaPhoto</a></li>
<li><a href="#inputmediavideo">InputMediaVideo</a></li>
</ul>
<h4><a class="anchor" name="inputmediaphoto" href="#inputmediaphoto"><i class="anchor-icon"></i></a>InputMediaPhoto</h4>
<p>Represents a photo to be sent.</p>
<table class="table">
<tbody>
<tr>
<td>type</td>
<td>String</td>
<td>Type of the result, must be <em>photo</em></td>
</tr>
<tr>
<td>media</td>
<td>String</td>
<td>File to send</td>
</tr>
</tbody>
</table>
<h4><a class="anchor" name="inputmediavideo" href="#inputmediavideo"><i class="anchor-icon"></i></a>InputMediaVideo</h4>
<p>Represents a video to be sent.</p>
<table class="table">
<tbody>
<tr>
<td>type</td>
<td>String</td>
<td>Type of the result, must be <em>video</em></td>
</tr>
<tr>
<td>media</td>
<td>String</td>
<td>File to send</td>
</tr>
<tr>
<td>duration</td>
<td>Integer</td>
<td><em>Optional</em>. Video duration in seconds</td>
</tr>
</tbody>
</table>
<h4><a class="anchor" name="passportelementerror" href="#passportelementerror"><i class="anchor-icon"></i></a>PassportElementError</h4>
<p>This object represents an error in the Telegram Passport element. It should be one of:</p>
<ul>
<li><a href="#passportelementerrordatafield">PassportElementErrorDataField</a></li>
</ul>
<h4><a class="anchor" name="getme" href="#getme"><i class="anchor-icon"></i></a>getMe</h4>
<p>A simple method for testing your bot&#39;s authentication token. Requires no parameters.</p>
<h4><a class="anchor" name="sendmessage" href="#sendmessage"><i class="anchor-icon"></i></a>sendMessage</h4>
<p>Use this method to send text messages. See <a href="https://core.telegram.org/bots/api#formatting-options">formatting options</a> for details.</p>
<table class="table">
<thead>
<tr>
<th>Parameter</th>
<th>Type</th>
<th>Required</th>
<th>Description</th>
</tr>
</thead>
<tbody>
<tr>
<td>chat_id</td>
<td>Integer or String</td>
<td>Yes</td>
<td>Unique identifier for the target chat</td>
</tr>
<tr>
<td>text</td>
<td>String</td>
<td>Yes</td>
<td>Text of the message to be sent</td>
</tr>
<tr>
<td>reply_markup</td>
<td><a href="#inlinekeyboardmarkup">InlineKeyboardMarkup</a> or <a href="#replykeyboardmarkup">ReplyKeyboardMarkup</a> or <a href="#replykeyboardremove">ReplyKeyboardRemove</a> or <a href="#forcereply">ForceReply</a></td>
<td>Optional</td>
<td>Additional interface options</td>
</tr>
<tr>
<td>disable_notification</td>
<td>Boolean</td>
<td>Optional</td>
<td>Sends the message silently.</td>
</tr>
</tbody>
</table>
<h4><a class="anchor" name="reportmedia" href="#reportmedia"><i class="anchor-icon"></i></a>reportMedia</h4>
<p>Reports media.</p>
<table class="table">
<tbody>
<tr>
<td>media</td>
<td><a href="#inputmedia">InputMedia</a></td>
<td>Yes</td>
<td>Media to report</td>
</tr>
<tr>
<td>error</td>
<td><a href="#passportelementerror">PassportElementError</a></td>
<td>Optional</td>
<td>Error to attach</td>
</tr>
</tbody>
</table>
</body>
</html>
"""


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture
def plain_config() -> GeneratorConfig:
    """No document aliases, no synthetic unions."""
    return GeneratorConfig.plain()


@pytest.fixture
def telegram_config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def sample_file(tmp_path, sample_document):
    path = tmp_path / "TelegramBotAPI.html"
    path.write_text(sample_document, encoding="utf-8")
    return path
