"""
In-memory stand-ins for the Playwright async API used by the tests
"""

from io import BytesIO
from types import SimpleNamespace

from PIL import Image


def make_png(size=(200, 100), color=(0, 0, 255)) -> bytes:
    """Encode a solid-color PNG"""
    buffer = BytesIO()
    Image.new('RGB', size, color).save(buffer, 'PNG')
    return buffer.getvalue()


class FakeFrame:
    def __init__(self, name):
        self.name = name


def make_response(url, status, frame, navigation=True):
    request = SimpleNamespace(is_navigation_request=lambda: navigation)
    return SimpleNamespace(url=url, status=status, frame=frame, request=request)


class FakePage:
    def __init__(self, site):
        self.site = site
        self.main_frame = FakeFrame('main')
        self.handlers = []
        self.url = None
        self.scripts = []
        self.waits = []
        self.full_page = None

    def on(self, event, handler):
        if event == 'response':
            self.handlers.append(handler)

    def emit(self, response):
        for handler in self.handlers:
            handler(response)

    async def goto(self, url, timeout=None, wait_until=None):
        self.url = url
        self.site.navigations.append((url, wait_until))
        behavior = self.site.behavior(url)
        main_response = None
        for extra in behavior.get('extra_responses', ()):
            frame = FakeFrame('child') if extra.get('child_frame') else self.main_frame
            self.emit(make_response(extra['url'], extra['status'], frame, extra.get('navigation', False)))
        if 'status' in behavior:
            main_response = make_response(behavior.get('response_url', url), behavior['status'], self.main_frame)
            # silent_events: only goto's return value carries the status
            if not behavior.get('silent_events'):
                self.emit(main_response)
        if behavior.get('goto_error'):
            raise behavior['goto_error']
        return main_response

    async def evaluate(self, script):
        self.scripts.append(script)
        error = self.site.behavior(self.url).get('evaluate_error')
        if error:
            raise error

    async def wait_for_timeout(self, timeout):
        self.waits.append(timeout)

    async def screenshot(self, full_page=False):
        self.full_page = full_page
        behavior = self.site.behavior(self.url)
        if behavior.get('screenshot_error'):
            raise behavior['screenshot_error']
        return make_png(behavior.get('size', (200, 100)), behavior.get('color', (0, 0, 255)))


class FakeBrowser:
    def __init__(self, site):
        self.site = site
        self.closed = False
        self.pages = []

    async def new_page(self, viewport=None):
        page = FakePage(self.site)
        self.pages.append(page)
        return page

    async def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, site):
        self.site = site

    async def launch(self, headless=True, args=None):
        if self.site.launch_error:
            raise self.site.launch_error
        browser = FakeBrowser(self.site)
        self.site.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, site):
        self.chromium = FakeChromium(site)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSite:
    """
    Callable replacement for async_playwright

    ``pages`` maps absolute URLs to behavior dicts with optional keys:
    status, response_url, extra_responses, silent_events, goto_error,
    evaluate_error, screenshot_error, size and color. ``extra_responses`` are
    emitted before the main document response, each a dict with url, status,
    navigation (default False) and child_frame. Unknown URLs answer 200 with
    a 200x100 image.
    """

    def __init__(self, pages=None, launch_error=None):
        self.pages = pages or {}
        self.launch_error = launch_error
        self.browsers = []
        self.navigations = []

    def behavior(self, url):
        return self.pages.get(url, {'status': 200})

    def __call__(self):
        return FakePlaywright(self)
