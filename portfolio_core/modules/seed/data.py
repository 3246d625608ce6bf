"""Default showcase content inserted into empty tables.

Images are expected under <STATIC_FOLDER>/portfolio/.
"""


def _page(number):
    return f'/static/portfolio/page_{number:02d}.png'


def _pages(*numbers):
    return [_page(n) for n in numbers]


DEFAULT_PROJECTS = [
    # B2B UI design
    {
        'title': 'Bait Treasury Management System',
        'description': (
            'Bait T6 is a SaaS treasury platform that gives enterprises one place to '
            'manage their funds efficiently, transparently and safely. It covers cash '
            'flow management, budget control, fund allocation, payments and reporting.'
        ),
        'category': 'ToB',
        'cover_image': _page(4),
        'images': _pages(4, 5, 6, 7, 8, 9, 10),
        'order': 1,
    },
    {
        'title': 'DNSPod Domain Management System',
        'description': (
            'DNSPod is the Tencent Cloud brand behind its domain resolution service. The '
            'redesign reworked the navigation framework, the home layout and the help '
            'center, raising domain registrations and management efficiency.'
        ),
        'category': 'Web',
        'cover_image': _page(21),
        'images': _pages(21, 22, 23, 24, 25, 26, 27, 28, 29, 30),
        'order': 2,
    },
    {
        'title': 'OPPO Finance Management System',
        'description': (
            "End-to-end UI design of OPPO's internal treasury SaaS, plus a visual and "
            'interaction rebuild of its official site.'
        ),
        'category': 'ToB',
        'cover_image': _page(13),
        'images': _pages(13, 14, 15, 16, 17),
        'order': 3,
    },
    # Consumer apps
    {
        'title': 'Bait Treasury App',
        'description': 'Mobile treasury app adapted for desktop, phone and large dashboard screens.',
        'category': 'App',
        'cover_image': _page(11),
        'images': _pages(11, 12),
        'order': 4,
    },
    {
        'title': 'DNSPod Mobile',
        'description': 'Mobile client for DNSPod with quick domain management and DNS resolution.',
        'category': 'App',
        'cover_image': _page(23),
        'images': _pages(23, 24),
        'order': 5,
    },
    {
        'title': 'Corporate University App',
        'description': 'Internal training platform with online courses and learning progress tracking.',
        'category': 'App',
        'cover_image': _page(49),
        'images': _pages(49, 50),
        'order': 6,
    },
    # AI, graphic and 3D design
    {
        'title': 'Domain Campaign Pages',
        'description': (
            'Discount campaign pages for DNSPod and Tencent Cloud, including the summer, '
            'new year and flash sale events, rendered in C4D with neon night lighting.'
        ),
        'category': 'GD',
        'cover_image': _page(50),
        'images': _pages(50, 51, 52),
        'order': 7,
    },
    {
        'title': 'C4D Visual Design',
        'description': 'Three-dimensional visuals made in Cinema 4D blending technology and art.',
        'category': 'AI',
        'cover_image': _page(53),
        'images': _pages(53, 54),
        'order': 8,
    },
    {
        'title': 'Feature Page Design',
        'description': 'Marketing and product feature pages with strong visual impact.',
        'category': 'GD',
        'cover_image': _page(55),
        'images': _pages(55, 56),
        'order': 9,
    },
]

DEFAULT_EXPERIENCES = [
    {
        'company': 'Shenzhen Bait Information Technology',
        'position': 'UI/UX Designer',
        'period': '2023/03 - 2026/03',
        'description': (
            'Core designer owning brand and product experience. Led treasury system UI '
            'for Chongqing Rural Commercial Bank and Huaxing Bank, and the full design '
            'of the treasury 4.0 product line.'
        ),
        'highlights': ['Led treasury 4.0 product design',
                       'Designed treasury systems for several banks',
                       'Built the design guidelines and component library'],
        'order': 1,
    },
    {
        'company': 'Baijuncheng Technology (OPPO)',
        'position': 'UI Designer',
        'period': '2022/06 - 2023/03',
        'description': (
            "End-to-end UI design of OPPO's internal treasury SaaS, plus a visual and "
            'interaction rebuild of its official site.'
        ),
        'highlights': ['Full-flow treasury SaaS design',
                       'Official site visual and interaction rebuild',
                       'Improved usability and operating efficiency'],
        'order': 2,
    },
    {
        'company': 'iSoftStone (Tencent Cloud)',
        'position': 'UI Designer',
        'period': '2019/06 - 2022/06',
        'description': (
            'Visual and UI design for Tencent Cloud products, including the DNSPod '
            'official site and the domain management system.'
        ),
        'highlights': ['DNSPod official site redesign',
                       'Domain management system improvements',
                       'Established the design guideline system'],
        'order': 3,
    },
]
