"""
Data Management Module - Site content catalog
Holds the owner-authored projects and blog posts and exposes them through a read-only store.
"""

from models import ProjectRecord, PostRecord


PROJECTS = [
    {
        'slug': 'project-a',
        'title': 'Enterprise CRM Solution',
        'category': 'Software Development',
        'description': (
            'Developed a scalable CRM platform for a large enterprise, integrating sales, marketing, '
            'and customer service modules. Focused on robust backend architecture and intuitive user interfaces.'
        ),
        'technologies': ['React', 'Node.js', 'PostgreSQL', 'AWS'],
        'image_ref': 'https://placehold.co/600x400/E0E0E0/333333?text=CRM+Solution',
        'full_content': """
<p>This project involved designing and implementing a comprehensive Customer Relationship Management (CRM) system tailored for enterprise-level operations. The primary goal was to centralize customer data, streamline sales processes, and enhance customer service efficiency.</p>
<p>Key features included lead management, sales pipeline tracking, customer support ticketing, and detailed analytics dashboards. We utilized a microservices architecture to ensure scalability and maintainability, with independent services for user authentication, data management, and reporting.</p>
<h3>Challenges &amp; Solutions:</h3>
<ul>
  <li><strong>Data Migration:</strong> Migrated vast amounts of legacy customer data from disparate systems, ensuring data integrity and minimal downtime.</li>
  <li><strong>Real-time Updates:</strong> Implemented WebSocket technology for real-time updates on sales activities and customer interactions, providing immediate insights to sales teams.</li>
  <li><strong>Security:</strong> Employed industry-standard encryption, role-based access control, and regular security audits to protect sensitive customer information.</li>
</ul>
<h3>Outcome:</h3>
<p>The deployed CRM solution led to a <strong>25% increase in sales team productivity</strong> and a <strong>15% improvement in customer satisfaction scores</strong> within the first six months of operation. Its modular design allows for easy future expansion and integration with other enterprise systems.</p>
""",
    },
    {
        'slug': 'project-b',
        'title': 'E-commerce Analytics Dashboard',
        'category': 'Data Analysis',
        'description': (
            'Built an interactive dashboard to visualize e-commerce sales trends, customer behavior, and '
            'inventory insights. Enabled data-driven decision-making for marketing and operations teams.'
        ),
        'technologies': ['Python', 'Pandas', 'Dash', 'SQL', 'Tableau'],
        'image_ref': 'https://placehold.co/600x400/E0E0E0/333333?text=Analytics+Dashboard',
        'full_content': """
<p>This project focused on developing an advanced analytics dashboard for an e-commerce platform. The objective was to provide key stakeholders with actionable insights into sales performance, customer demographics, and product popularity.</p>
<p>The dashboard aggregated data from various sources, including transactional databases, web analytics tools, and marketing campaign platforms. Custom visualizations were created to highlight trends, identify top-performing products, and pinpoint areas for improvement in customer engagement.</p>
<h3>Methodology:</h3>
<ul>
  <li><strong>Data Collection:</strong> Automated scripts were developed to extract data from disparate sources into a centralized data warehouse.</li>
  <li><strong>ETL Processes:</strong> Implemented robust ETL (Extract, Transform, Load) pipelines using Python and SQL to clean, transform, and load data for analysis.</li>
  <li><strong>Interactive Visualizations:</strong> Utilized Dash (Plotly) to create interactive charts and graphs, allowing users to filter data by date range, product category, and customer segment.</li>
</ul>
<h3>Impact:</h3>
<p>The dashboard facilitated a <strong>10% reduction in marketing spend</strong> by optimizing campaign targeting and a <strong>5% increase in average order value</strong> due to better product recommendations.</p>
""",
    },
    {
        'slug': 'project-c',
        'title': 'Mobile App for Event Management',
        'category': 'Mobile Development',
        'description': (
            'Designed and developed a cross-platform mobile application for managing events, including '
            'registration, scheduling, and real-time updates for attendees.'
        ),
        'technologies': ['React Native', 'Firebase', 'Redux'],
        'image_ref': 'https://placehold.co/600x400/E0E0E0/333333?text=Mobile+App',
        'full_content': """
<p>This project involved creating a cross-platform mobile application to streamline event management for organizers and enhance the experience for attendees. The app was built using React Native to ensure a single codebase for both iOS and Android platforms.</p>
<p>Features included event discovery, personalized schedules, push notifications for real-time updates, interactive maps of venues, and attendee networking capabilities. Firebase was used for backend services, including user authentication, real-time database, and cloud functions.</p>
<h3>Key Features:</h3>
<ul>
  <li><strong>User Authentication:</strong> Secure login and registration with email/password and social logins.</li>
  <li><strong>Personalized Schedules:</strong> Attendees could build their own schedules by selecting sessions and workshops.</li>
  <li><strong>Real-time Notifications:</strong> Sent immediate updates on session changes, speaker announcements, and event news.</li>
  <li><strong>Offline Capability:</strong> Implemented data caching to allow users to access event information even without an internet connection.</li>
</ul>
<h3>Result:</h3>
<p>The app successfully supported events with over 5,000 attendees, significantly improving engagement and reducing the need for physical information desks. It received positive feedback for its intuitive interface and reliable performance.</p>
""",
    },
]


POSTS = [
    {
        'slug': 'ai-cybersecurity-trends',
        'title': 'The Latest Trends in AI for Cybersecurity',
        'date': 'July 3, 2025',
        'excerpt': (
            'Artificial intelligence is rapidly transforming the cybersecurity landscape, offering both '
            'unprecedented opportunities and new challenges. This post explores key trends like AI-powered '
            'threat detection, automated incident response, and the ethical considerations of AI in security.'
        ),
        'full_content': """
<p>Artificial intelligence (AI) is no longer a futuristic concept but a present reality that is profoundly reshaping the cybersecurity domain. Its capabilities in processing vast amounts of data, identifying complex patterns, and automating responses are proving invaluable in the ongoing battle against sophisticated cyber threats.</p>
<h3>Key Trends:</h3>
<ul>
  <li><strong>AI-Powered Threat Detection:</strong> Machine learning algorithms are now capable of analyzing network traffic, user behavior, and endpoint data in real-time to detect anomalies and identify emerging threats that traditional signature-based systems might miss. This includes advanced malware, zero-day exploits, and insider threats.</li>
  <li><strong>Automated Incident Response:</strong> AI is enabling security operations centers (SOCs) to automate repetitive tasks like threat triage, containment, and even remediation. This significantly reduces response times and frees up human analysts for more complex strategic tasks.</li>
  <li><strong>Predictive Analytics:</strong> By analyzing historical attack data and threat intelligence, AI models can predict potential future attack vectors and vulnerabilities, allowing organizations to proactively strengthen their defenses.</li>
  <li><strong>Behavioral Analytics:</strong> AI excels at establishing baselines for normal user and system behavior. Any deviation from these baselines can trigger alerts, helping to identify compromised accounts or malicious insider activities.</li>
</ul>
<h3>Challenges and Ethical Considerations:</h3>
<p>Despite its promise, the integration of AI in cybersecurity is not without its challenges. These include the potential for AI systems to be biased, the complexity of explaining AI decisions (the "black box" problem), and the risk of AI being used by adversaries for more sophisticated attacks (e.g., AI-powered phishing or malware generation).</p>
<p>Ethical considerations are paramount. Ensuring transparency, accountability, and fairness in AI algorithms used for security is crucial to maintain trust and prevent unintended consequences. The balance between automated defense and human oversight will be a continuous area of development.</p>
<h3>Conclusion:</h3>
<p>AI is undeniably a game-changer for cybersecurity. As the threat landscape evolves, AI's ability to adapt, learn, and automate will be critical for effective defense. Staying abreast of these trends and understanding both the opportunities and challenges will be vital for ICT professionals.</p>
""",
    },
    {
        'slug': 'web3-future-internet',
        'title': 'Web3: The Decentralized Future of the Internet?',
        'date': 'June 20, 2025',
        'excerpt': (
            'Web3 promises a new era of the internet built on decentralization, blockchain, and user ownership. '
            'This post explores the core concepts, potential applications, and the challenges facing its '
            'widespread adoption.'
        ),
        'full_content': """
<p>Web3 represents the next generation of the internet, aiming to shift power from large centralized entities back to individual users. Built on the foundational technologies of blockchain, cryptocurrencies, and non-fungible tokens (NFTs), Web3 envisions a decentralized web where users have greater control over their data and digital assets.</p>
<h3>Core Concepts:</h3>
<ul>
  <li><strong>Decentralization:</strong> Unlike Web2, where applications often run on centralized servers controlled by a few tech giants, Web3 applications (dApps) are built on decentralized networks (blockchains), meaning no single entity controls them.</li>
  <li><strong>Blockchain Technology:</strong> Provides a secure, transparent, and immutable ledger for transactions and data, forming the backbone of Web3.</li>
  <li><strong>Cryptocurrency &amp; NFTs:</strong> Enable new economic models, digital ownership, and unique digital assets within Web3 ecosystems.</li>
  <li><strong>User Ownership:</strong> Users own their data and digital identities, rather than platforms.</li>
</ul>
<h3>Potential Applications:</h3>
<ul>
  <li><strong>Decentralized Finance (DeFi):</strong> Financial services built on blockchain, offering alternatives to traditional banking.</li>
  <li><strong>Gaming (GameFi):</strong> Play-to-earn models where players own in-game assets as NFTs.</li>
  <li><strong>Social Media:</strong> Decentralized social platforms where users control their content and data.</li>
  <li><strong>Supply Chain Management:</strong> Transparent and traceable supply chains using blockchain.</li>
</ul>
<h3>Challenges to Adoption:</h3>
<p>Despite the excitement, Web3 faces significant hurdles for mainstream adoption. These include:</p>
<ul>
  <li><strong>Scalability:</strong> Many blockchains struggle with transaction speed and volume.</li>
  <li><strong>Usability:</strong> The user experience for dApps can be complex for non-technical users.</li>
  <li><strong>Regulation:</strong> The regulatory landscape for cryptocurrencies and decentralized technologies is still evolving.</li>
  <li><strong>Environmental Concerns:</strong> The energy consumption of some proof-of-work blockchains is a concern.</li>
</ul>
<h3>The Future:</h3>
<p>Web3 is still in its early stages, but its potential to reshape digital interactions is immense. As an ICT professional, understanding its underlying principles and emerging applications is crucial for navigating the evolving internet landscape.</p>
""",
    },
]


class ContentStore:
    """
    Read-only catalog of projects and posts.

    Records keep their insertion order, which is also the display order on list pages.
    Slugs must be unique within each record type.

    Args:
        projects: iterable of ProjectRecord
        posts: iterable of PostRecord
    """

    def __init__(self, projects=(), posts=()):
        self._projects = tuple(projects)
        self._posts = tuple(posts)
        self._projects_by_slug = _index_by_slug(self._projects, 'project')
        self._posts_by_slug = _index_by_slug(self._posts, 'post')

    def list_projects(self):
        return self._projects

    def list_posts(self):
        return self._posts

    def find_project_by_slug(self, slug):
        """Return the matching ProjectRecord, or None when the slug is unknown"""
        return self._projects_by_slug.get(slug)

    def find_post_by_slug(self, slug):
        """Return the matching PostRecord, or None when the slug is unknown"""
        return self._posts_by_slug.get(slug)

    def project_slugs(self):
        return [p.slug for p in self._projects]

    def post_slugs(self):
        return [p.slug for p in self._posts]

    def __repr__(self):
        return f"<ContentStore projects={len(self._projects)} posts={len(self._posts)}>"


def _index_by_slug(records, kind):
    index = {}
    for record in records:
        if record.slug in index:
            raise ValueError(f"Duplicate {kind} slug: {record.slug}")
        index[record.slug] = record
    return index


def load_default_store():
    """Build the store from the site owner's content"""
    return ContentStore(
        projects=[ProjectRecord.from_dict(p) for p in PROJECTS],
        posts=[PostRecord.from_dict(p) for p in POSTS],
    )


__all__ = ['PROJECTS', 'POSTS', 'ContentStore', 'load_default_store']
