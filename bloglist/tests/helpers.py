"""Sample data shared by the test modules."""

from bloglist.models.blog import BlogRecord

# Likes 7, 5, 10, 0, 2: total 24, favorite "First class tests"
INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "First class tests",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
        "likes": 10,
    },
    {
        "title": "TDD harms architecture",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
        "likes": 0,
    },
    {
        "title": "Type wars",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
        "likes": 2,
    },
]


def make_blogs(*likes: int) -> list[BlogRecord]:
    """Build blogs with the given like counts and distinct titles."""
    return [
        BlogRecord(
            id=f"blog{i}",
            title=f"Blog {i}",
            author=f"Author {i}",
            url=f"http://example.com/{i}",
            likes=n,
        )
        for i, n in enumerate(likes)
    ]
