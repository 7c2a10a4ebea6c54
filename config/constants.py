"""
Centralized constants for Program DOCX Compiler.
All format magic numbers live here.
"""

# ===========================================
# OFFICE DOCUMENT UNITS
# ===========================================
TWIPS_PER_CM = 567                    # twentieths of a point per centimeter
LINE_SPACING_UNIT = 240               # w:line value for single spacing
HALF_POINTS_PER_POINT = 2             # w:sz is expressed in half-points
PERCENT_WIDTH_FULL = 5000             # w:tblW type="pct" is in fiftieths of a percent

# ===========================================
# LAYOUT
# ===========================================
PARAGRAPH_SPACE_AFTER = 120           # twips after each body paragraph
HEADING_SPACE_BEFORE = 240            # twips before a section heading
HEADING_SPACE_AFTER = 120             # twips after a section heading
SECTION_SPACER_AFTER = 240            # twips after the spacer closing a section
COVER_SPACE_BEFORE = 2000             # pushes the title down the cover page
PAGE_NUMBER_FONT_SIZE = 10            # points
PAGE_NUMBER_PREFIX = 'Стр. '

# ===========================================
# TABLES
# ===========================================
TABLE_CELL_DELIMITER = '|'
TABLE_RULE_CHAR = '-'
TABLE_BORDER_SIZE = 4                 # eighths of a point
TABLE_BORDER_COLOR = '000000'
TABLE_HEADER_FILL = 'F2F2F2'

# ===========================================
# SECTIONS
# ===========================================
TITLE_PAGE_KEY = 'title_page'

SECTION_ORDER = (
    'explanatory_note',
    'goal',
    'tasks',
    'results',
    'curriculum',
    'assessment',
    'literature',
)

SECTION_LABELS = {
    'title_page': 'Титульный лист',
    'explanatory_note': 'Пояснительная записка',
    'goal': 'Цель программы',
    'tasks': 'Задачи',
    'results': 'Планируемые результаты',
    'curriculum': 'Учебный план',
    'assessment': 'Контрольно-измерительные материалы',
    'literature': 'Список литературы',
}

# ===========================================
# DEFAULT FORMATTING
# ===========================================
DEFAULT_FORMATTING = {
    'font_family': 'Times New Roman',
    'font_size': 14,
    'heading_font_size': 16,
    'heading_bold': True,
    'line_spacing': 1,
    'alignment': 'justified',
    'margin_top': 2,
    'margin_bottom': 2,
    'margin_left': 3,                 # wider for binding
    'margin_right': 1.5,
    'show_page_numbers': True,
}

FONT_OPTIONS = [
    'Times New Roman',
    'Arial',
    'Calibri',
    'Verdana',
    'Helvetica',
]

# ===========================================
# EXPORT
# ===========================================
FILENAME_SUFFIX = '_Program.docx'
OUTPUT_DIR = 'data/output'
DOCX_MIME_TYPE = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
DOCUMENT_AUTHOR = 'Program DOCX Compiler'

# ===========================================
# TOKEN PROVIDER
# ===========================================
TOKEN_EXPIRY_MARGIN_SECONDS = 5
TOKEN_REFRESH_LEAD_SECONDS = 60
TOKEN_RETRY_DELAY_SECONDS = 30
TOKEN_MIN_REFRESH_DELAY_SECONDS = 1
GIGACHAT_AUTH_URL = 'https://ngw.devices.sberbank.ru:9443/api/v2/oauth'
GIGACHAT_SCOPE = 'GIGACHAT_API_PERS'
API_TIMEOUT_SECONDS = 30

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/program_docx.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
