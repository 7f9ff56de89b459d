"""HTML snapshots shaped like LinkedIn's public job search and job pages."""

SEARCH_URL = "https://www.linkedin.com/jobs/search/?keywords=entry%20level"

SEARCH_HTML = """
<html>
<body>
<ul class="jobs-search__results-list">
  <li>
    <div class="base-card job-search-card">
      <a class="base-card__full-link" href="https://www.linkedin.com/jobs/view/junior-data-analyst-at-acme-3801">
        <span class="sr-only">Junior Data Analyst</span>
      </a>
      <div class="base-search-card__info">
        <h3 class="base-search-card__title">
          Junior Data Analyst
        </h3>
        <h4 class="base-search-card__subtitle">
          Acme Analytics
        </h4>
        <div class="base-search-card__metadata">
          <span class="job-search-card__location">
            Austin, TX
          </span>
        </div>
      </div>
    </div>
  </li>
  <li>
    <div class="base-card job-search-card">
      <a class="base-card__full-link" href="/jobs/view/associate-software-engineer-at-globex-3802">
        <span class="sr-only">Associate Software Engineer</span>
      </a>
      <div class="base-search-card__info">
        <h3 class="base-search-card__title">Associate Software Engineer</h3>
        <h4 class="base-search-card__subtitle">Globex</h4>
      </div>
    </div>
  </li>
  <li>
    <div class="base-card job-search-card">
      <div class="base-search-card__info">
        <h3 class="base-search-card__title">Support Specialist</h3>
        <h4 class="base-search-card__subtitle">Initech</h4>
        <span class="job-search-card__location">Denver, CO</span>
      </div>
    </div>
  </li>
  <li>
    <div class="base-card job-search-card">
      <a class="base-card__full-link" href="https://www.linkedin.com/jobs/view/intern-3804"></a>
      <h3 class="base-search-card__title">Marketing Intern</h3>
      <span class="job-search-card__location">Remote</span>
    </div>
  </li>
</ul>
</body>
</html>
"""

# Two raw items, the second without any link
SEARCH_HTML_ONE_MISSING_LINK = """
<ul class="jobs-search__results-list">
  <li>
    <a href="https://www.linkedin.com/jobs/view/qa-tester-4001">QA Tester</a>
    <h3 class="base-search-card__title">QA Tester</h3>
    <h4 class="base-search-card__subtitle">Umbrella</h4>
    <span class="job-search-card__location">Boston, MA</span>
  </li>
  <li>
    <h3 class="base-search-card__title">Help Desk Technician</h3>
    <h4 class="base-search-card__subtitle">Hooli</h4>
  </li>
</ul>
"""

EMPTY_SEARCH_HTML = """
<html><body><ul class="jobs-search__results-list"></ul></body></html>
"""

DETAIL_HTML = """
<html>
<body>
<section class="decorated-job-posting__details">
  <div class="description__text description__text--rich">
    <p>Join our analytics team and learn SQL on the job.</p>
  </div>
  <ul class="description__job-criteria-list">
    <li class="description__job-criteria-item">
      <h3 class="description__job-criteria-subheader">Seniority level</h3>
      <span class="description__job-criteria-text">Entry level</span>
    </li>
    <li class="description__job-criteria-item">
      <h3 class="description__job-criteria-subheader">Employment type</h3>
      <span class="description__job-criteria-text">Full-time</span>
    </li>
    <li class="description__job-criteria-item">
      <h3 class="description__job-criteria-subheader">Base Compensation</h3>
      <span class="description__job-criteria-text">$55,000 - $65,000</span>
    </li>
    <li class="description__job-criteria-item">
      <h3 class="description__job-criteria-subheader">Experience level</h3>
      <span class="description__job-criteria-text">Associate</span>
    </li>
    <li class="description__job-criteria-item">
      <h3 class="description__job-criteria-subheader">Industries</h3>
      <span class="description__job-criteria-text">Software Development</span>
    </li>
  </ul>
  <ul class="job-details-skill-match-status-list">
    <li> SQL </li>
    <li>Python</li>
    <li>Tableau</li>
  </ul>
</section>
</body>
</html>
"""

DETAIL_HTML_NO_CRITERIA = """
<html>
<body>
<section class="decorated-job-posting__details">
  <div class="description__text">Great first job.</div>
</section>
</body>
</html>
"""
